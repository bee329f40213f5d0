"""
Terminal color codes for formatted output of the charmff command line.
"""


class tcolors:
    """
    Terminal color codes for formatted output.

    Usage:
        from charmff.utilities.colors import tcolors

        print(f"{tcolors.GREEN}f_+(0) = 0.6{tcolors.ENDC}")
        print(f"{tcolors.WARNING}Using default parameter card{tcolors.ENDC}")
    """

    GREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    WHITE = "\033[97m"

    ENDC = "\033[0m"
    BOLD = "\033[1m"

    BOLDWHITE = BOLD + WHITE
