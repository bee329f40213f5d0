import argparse
import pathlib
import sys

if __name__ == "__main__":
    #--allow running as: python3 charmff/main.py from the repository root
    parent_dir = pathlib.Path(__file__).resolve().parent.parent
    if str(parent_dir) not in sys.path:
        sys.path.insert(0, str(parent_dir))

    from charmff.model.factory import create_form_factors
    from charmff.qcdlib.integrate import IntegrationError
    from charmff.qcdlib.options import ConfigurationError
    from charmff.qcdlib.parameters import Parameters, cards_dir, default_card
    from charmff.utilities import configure_logger, tcolors

    parser = argparse.ArgumentParser(
        description="Charm-meson form factors from light-cone sum rules and z-expansions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
        Examples:
        python3 charmff/main.py -c kkmo2009_reference.yaml
        python3 charmff/main.py -f D->pi::BSZ2015 -q 0.0 0.5 1.0
        python3 charmff/main.py --diagnostics --log-level INFO

        Available parameter cards in cards/:
        {chr(10).join(f'  - {f.name}' for f in sorted(cards_dir.glob('*.yaml')) if cards_dir.exists())}
        """,
    )

    parser.add_argument(
        "--card",
        "-c",
        type=str,
        default=default_card,
        help=f"parameter card (looked up in cards/ directory). Default: {default_card}",
    )
    parser.add_argument(
        "--form-factors",
        "-f",
        type=str,
        default="D->pi::KKMO2009",
        help="form factors as '<process>::<parametrisation>'. Default: D->pi::KKMO2009",
    )
    parser.add_argument(
        "--q2",
        "-q",
        type=float,
        nargs="+",
        default=[0.0, 0.5, 1.0, 1.5, 2.0],
        help="momentum transfers [GeV^2]",
    )
    parser.add_argument(
        "--no-rescale",
        action="store_true",
        help="keep the Borel parameter fixed (rescale-borel = 0)",
    )
    parser.add_argument(
        "--diagnostics",
        action="store_true",
        help="print the intermediate results of the D->pi sum rules",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="logging level; default from config.yaml",
    )

    args = parser.parse_args()
    configure_logger(level=args.log_level)

    try:
        parameters = Parameters.from_card(args.card)
    except (FileNotFoundError, ValueError) as e:
        print(f"{tcolors.FAIL}Error: {e}{tcolors.ENDC}")
        print(f"Available parameter cards in {cards_dir}:")
        for f in sorted(cards_dir.glob("*.yaml")):
            print(f"  - {f.name}")
        print(f"\nUsage: python3 charmff/main.py -c <card>\n")
        sys.exit(1)

    if args.card == default_card:
        print(f"{tcolors.WARNING}Using default parameter card: {args.card}{tcolors.ENDC}\n")
    else:
        print(f"{tcolors.GREEN}Using parameter card: {args.card}{tcolors.ENDC}\n")

    options = {"rescale-borel": "0" if args.no_rescale else "1"}
    try:
        ff = create_form_factors(args.form_factors, parameters, options)
    except ConfigurationError as e:
        print(f"{tcolors.FAIL}Error: {e}{tcolors.ENDC}")
        sys.exit(1)

    print(f"{tcolors.BOLDWHITE}[main.py] {tcolors.ENDC}{args.form_factors}")
    try:
        if hasattr(ff, "decay_constant"):
            print(f"f_D = {ff.decay_constant():.5f}")
        print(f"{'q2':>8} {'f_+':>10} {'f_0':>10} {'f_T':>10}")
        for q2 in args.q2:
            print(f"{q2:8.3f} {ff.f_p(q2):10.5f} {ff.f_0(q2):10.5f} {ff.f_t(q2):10.5f}")

        if args.diagnostics:
            if not hasattr(ff, "diagnostics"):
                print(f"{tcolors.WARNING}{args.form_factors} has no diagnostics{tcolors.ENDC}")
            else:
                print(f"\n{tcolors.BOLDWHITE}[main.py] {tcolors.ENDC}{tcolors.GREEN}diagnostics{tcolors.ENDC}")
                for label, value in ff.diagnostics():
                    print(f"  {label:<50s} {value:12.5f}")
    except IntegrationError as e:
        print(f"{tcolors.FAIL}Error: {e}{tcolors.ENDC}")
        sys.exit(1)
