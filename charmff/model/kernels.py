"""
Imaginary parts of the NLO hard-scattering kernels of the D->pi light-cone sum rules,
and the auxiliary functions of the LO twist-3 and twist-4 integrands.

Each kernel is a function of the two ratios r1 = q2/mc2 and r2 = s/mc2 and is
split by analytic structure into a theta(1-rho) piece, a theta(rho-1) piece and
a delta-function (endpoint) piece. The three pieces are summed by the integrands
in lcsr_dpi.py. All kernels are pure functions of their arguments; the LCDA
moments and the scale logarithm enter as explicit inputs.

Kernels follow [DKMMO2008] appendix B and [KKMO2009]. The auxiliary functions
I3, I4, ... are integrals of the three-particle LCDAs and take the momentum
fraction u instead of r1, r2.

inputs: r1 = q2/mc2; type = float
        r2 = s/mc2;  type = float
"""

import numpy as np
import warnings

from charmff.qcdlib.special import re_li2

warnings.filterwarnings("ignore", message="divide by zero encountered in log")
warnings.filterwarnings("ignore", message="invalid value encountered in log")
warnings.filterwarnings("ignore", message="divide by zero encountered in scalar divide")
warnings.filterwarnings("ignore", message="invalid value encountered in scalar divide")
warnings.filterwarnings("ignore", message="invalid value encountered in scalar multiply")

pi2 = np.pi**2


###############################################################################
# f+ : twist 2
###############################################################################

def tw2_theta_1mrho(r1, r2, mc2, mu2, a2pi, a4pi):
    r12 = r1 * r1; r13 = r12 * r1; r14 = r12 * r12; r15 = r14 * r1
    r22 = r2 * r2; r23 = r22 * r2; r24 = r22 * r22; r25 = r24 * r2
    L = np.log((r2 - 1.0)**2 * mc2 / (mu2 * r2))

    ca0 = (r1 - r2)**4 * (-3.0 + r1 + r2 * 2.0)
    ca2 = (r1 - r2)**2 * (
                 (-125.0 + r1 * 155.0 - r12 * 43.0 + r13)
          + r2 * (220.0 - r1 * 224.0 + r12 * 40.0)
          + r22 * (-108.0 + 72.0 * r1)
          + r23 * 12.0)
    ca4 = ((-3087.0 + r1 * 6804.0 - r12 * 5096.0 + r13 * 1484.0 - r14 * 136.0 + r15)
          + r2  * (8631.0 - 17024.0 * r1 + 10836.0 * r12 - 2424.0 * r13 + 131.0 * r14)
          + r22 * (-8750.0 + 14700.0 * r1 - 7200.0 * r12 + 950.0 * r13)
          + r23 * (3850.0 - r1 * 5000.0 + r12 * 1450.0)
          + r24 * (-675.0 + r1 * 525.0)
          + r25 * 30.0)

    cb0 = (r1 - r2)**4
    cb2 = (r1 - r2)**2 * (15.0 - r1 * 10.0 + r12 + r2 * (-20.0 + r1 * 8.0) + r22 * 6.0)
    cb4 = ((210.0 - r1 * 336.0 + r12 * 168.0 - r13 * 28.0 + r14)
          + r2  * (-504.0 + r1 * 672.0 - r12 * 252.0 + r13 * 24.0)
          + r22 * (420.0 - r1 * 420.0 + r12 * 90.0)
          + r23 * (-140.0 + r1 * 80.0)
          + r24 * 15.0)

    cb = cb0 + cb2 * a2pi + cb4 * a4pi

    return (
            (r1 - r2) * (L - 1.0 / r2) * (ca0 + ca2 * a2pi + ca4 * a4pi)
            + (r1 - 1.0) * (1.0 / r2 - 1.0) * (r2 - r1) * cb
            + (1.0 - r1) * (r1 - 1.0) * (L - 1.0) * cb
        ) * (r1 - 1.0) * 3.0 / (r1 - r2)**8


def tw2_theta_rhom1(r1, r2, mc2, mu2, a2pi, a4pi):
    r12 = r1 * r1; r13 = r12 * r1; r14 = r12 * r12; r15 = r14 * r1; r16 = r13 * r13
    r22 = r2 * r2; r23 = r22 * r2; r24 = r22 * r22; r25 = r24 * r2; r26 = r23 * r23; r27 = r24 * r23
    r28 = r24 * r24
    Lr2 = np.log(r2); Lr2m1 = np.log(r2 - 1.0); Lmu = np.log(mc2 / mu2)

    ca00 = ((-r1 * 4. + r12 * 4.)
        + r2  * (3. + r1 * 12. - r12 * 12.)
        + r22 * (-13. - r1 * 4. + r12 * 8.)
        + r23 * (13. - r1 * 4.)
        - r24 * 3.)
    ca0mu = (r2 * (1. - r1 * 3. + r12 * 2.)
        + r22 * (r1 * 2. - r12 * 2.)
        + r23 * (-1. + r1))
    ca0r2 = (r2 * (-1. + r12)
        + r22 * (3. - r1 * 4. + r12))
    ca0r2m1 = 2.0 * ca0mu

    ca20 = ((r1 * 1680. - r12 * 3120 + r13 * 1728 - r14 * 288.)
        + r2 * (-1500. - r1 * 8675. + r12 * 17308. - r13 * 8208. + r14 * 864.)
        + r22 * (10895. + r1 * 2160. - r12 * 21084. + r13 * 10080. - r14 * 576.)
        + r23 * (-19396. + r1 * 15264. + r12 * 5412. - r13 * 3600.)
        + r24 * (12516. - r1 * 12880. + r12 * 1484.)
        + r25 * (-2576. + r1 * 2451.)
        + r26 * 61.)
    ca2mu = (r2 * (-180. + r1 * 1740. - r12 * 2712. + r13 * 1296. - r14 * 144.)
        + r22 * (-840. - r1 * 1536. + r12 * 4248. - r13 * 2016. + r14 * 144.)
        + r23 * (2448. - r1 * 1944. - r12 * 1224. + r13 * 720.)
        + r24 * (-1800. + r1 * 2112. - r12 * 312.)
        + r25 * (372. - r1 * 372.))
    ca2r2 = (r2 * (180. + r1 * 840. - r12 * 1728. + r13 * 720. - r14 * 72.)
        + r22 * (-1740. + r1 * 1536. + r12 * 144. + r13 * 432. - r14 * 72.)
        + r23 * (1992. - r1 * 2448. + r12 * 1512. - r13 * 576.)
        + r24 * (-216. - r1 * 672. + r12 * 168.)
        + r25 * (-300. + r1 * 300.))
    ca2r2m1 = 2.0 * ca2mu

    ca40 = (r1 * 98910. - r12 * 281610. + r13 * 294000. - r14 * 136500. + r15 * 27000. - r16 * 1800.
        + r2  * (-92610. - r1 * 628467. + r12 * 2091411. - r13 * 2110325. + r14 * 869950. - r15 * 136800. + r16 * 5400.)
        + r22 * (865977. - r1 * 51660. - r12 * 3323460. + r13 * 3765400. - r14 * 1417650. + r15 * 181800. - r16 * 3600.)
        + r23 * (-2201451. + r1 * 2911860. + r12 * 894420. - r13 * 2358600. + r14 * 840450. - r15 * 72000.)
        + r24 * (2437925. - r1 * 4042510. + r12 * 1372230. + r13 * 345800. - r14 * 156250.)
        + r25 * (-1293760. + r1 * 2102595. - r12 * 890655. + r13 * 63725.)
        + r26 * (307725. - r1 * 414708. + r12 * 137664.)
        + r27 * (-23987. + r1 * 23980)
        + r28 * 181.)
    ca4mu = (r2 * (-6300. + r1 * 107730. - r12 * 271530. + r13 * 266700. - r14 * 115950. + r15 * 20250. - r16 * 900.)
        + r22 * (-63630. - r1 * 103320. + r12 * 557550. - r13 * 603000. + r14 * 246600. - r15 * 35100. + r16 * 900.)
        + r23 * (242550. - r1 * 299250. - r12 * 210600. + r13 * 411300. - r14 * 158850. + r15 * 14850.)
        + r24 * (-304500. + r1 * 539400. - r12 * 200700. - r13 * 62400. + r14 * 28200.)
        + r25 * (169650. - r1 * 304200. + r12 * 147150. - r13 * 12600.)
        + r26 * (-40950. + r1 * 62820. - r12 * 21870.)
        + r27 * (3180. - r1 * 3180.))
    ca4r2 = (r2 * (6300. + r1 * 63630. - r12 * 204750. + r13 * 210000. - r14 * 87750. + r15 * 12600. - r16 * 450.)
        + r22 * (-107730. + r1 * 103320. + r12 * 166950. - r13 * 237000. + r14 * 74250. + r15 * 3600. - r16 * 450.)
        + r23 * (233730. - r1 * 425250. + r12 * 210600. - r13 * 45000. + r14 * 65700 - r15 * 10800.)
        + r24 * (-172200. + r1 * 300600. - r12 * 165600. + r13 * 71400. - r14 * 23700.)
        + r25 * (34050. - r1 * 16650. - r12 * 54900. + r13 * 8100.)
        + r26 * (8100. - r1 * 38520. + r12 * 17820.)
        + r27 * (-2730. + r1 * 2730.))
    ca4r2m1 = 2.0 * ca4mu

    return (-3.0 / (r2 * (r1 - r2)**4) * (ca00 + ca0mu * Lmu + ca0r2 * Lr2 + ca0r2m1 * Lr2m1)
        + 1.0 / (4.0 * r2 * (r1 - r2)**6) * (ca20 + ca2mu * Lmu + ca2r2 * Lr2 + ca2r2m1 * Lr2m1) * a2pi
        + 1.0 / (10.0 * r2 * (r1 - r2)**8) * (ca40 + ca4mu * Lmu + ca4r2 * Lr2 + ca4r2m1 * Lr2m1) * a4pi)


def tw2_delta(r1, r2, mc2, mu2, a2pi, a4pi):
    r12 = r1 * r1; r13 = r12 * r1; r14 = r12 * r12; r15 = r13 * r12
    r22 = r2 * r2; r23 = r22 * r2; r24 = r22 * r22; r25 = r23 * r22; r26 = r23 * r23
    L1mr1 = np.log(1.0 - r1); Lr2 = np.log(r2); Lr2m1 = np.log(r2 - 1.0); Lmu = np.log(mc2 / mu2)
    L1mr12 = L1mr1 * L1mr1; Lr2m12 = Lr2m1 * Lr2m1
    dilogr1 = re_li2(r1)
    dilog1mr2 = re_li2(1.0 - r2)

    ca00 = r2 * (18.0 + pi2 - r1 * (10.0 + pi2)) + r22 * (-10.0 - pi2 + r1 * (2.0 + pi2))
    ca0mu = r2 * (-15.0 + r1 * 9.0) + r22 * (9.0 - r1 * 3.0)
    ca0r1 = -2.0 + r1 * 2.0 + r2 * (4.0 - r1 * 4.0) + r22 * (-2.0 + r1 * 2.0)
    ca0r12 = r2 * (-2.0 + r1 * 2.0) + r22 * (2.0 - r1 * 2.0)

    ca20 = (r2 * (5.0 * (34.0 + pi2) - r1 * 10.0 * (26.0 + pi2) + r12 * 6.0 * (18.0 + pi2) + r13 * (-10.0 - pi2))
        + r22 * (-10.0 * (26.0 + pi2) + r1 * 18.0 * (18.0 + pi2) - r12 * 9.0 * (10.0 + pi2) + r13 * (2.0 + pi2))
        + r23 * (6.0 * (18.0 + pi2) - r1 * 9.0 * (10.0 + pi2) + r12 * 3.0 * (2.0 + pi2))
        + r24 * (-10.0 - pi2 + r1 * (2.0 + pi2)))
    ca2mu = (r2 * (-135.0 + r1 * 210.0 - r12 * 90.0 + r13 * 9.0)
        + r22 * (210.0 - r1 * 270.0 + r12 * 81.0 - r13 * 3.0)
        + r23 * (-90.0 + r1 * 81.0 - r12 * 9.0)
        + r24 * (9.0 - r1 * 3.0))
    ca2r1 = (-10.0 + r1 * 20.0 - r12 * 12.0 + r13 * 2.0
        + r2  * (30.0 - r1 * 56.0 + r12 * 30.0 - r13 * 4.0)
        + r22 * (-32.0 + r1 * 54.0 - r12 * 24.0 + r13 * 2.0)
        + r23 * (14.0 - r1 * 20.0 + r12 * 6.0)
        + r24 * (-2.0 + r1 * 2.0))
    ca2r12 = (r2 * (-10.0 + r1 * 20.0 - r12 * 12.0 + r13 * 2.0)
        + r22 * (20.0 - r1 * 36.0 + r12 * 18.0 - r13 * 2.0)
        + r23 * (-12.0 + r1 * 18.0 - r12 * 6.0)
        + r24 * (2.0 - r1 * 2.0))

    ca40 = (r2 * (42.0 * (50.0 + pi2) - r1 * 126.0 * (42.0 + pi2) + r12 * 140.0 * (34.0 + pi2) - r13 * 70.0 * (26.0 + pi2) + r14 * 15.0 * (18.0 + pi2) + r15 * (-10.0 - pi2))
        + r22 * (-126.0 * (42.0 + pi2) + r1 * 350.0 * (34.0 + pi2) - r12 * 350.0 * (26.0 + pi2) + r13 * 150.0 * (18.0 + pi2) - r14 * 25.0 * (10.0 + pi2) + r15 * (2.0 + pi2))
        + r23 * (140.0 * (34.0 + pi2) - r1 * 350.0 * (26.0 + pi2) + r12 * 300.0 * (18.0 + pi2) - r13 * 100.0 * (10.0 + pi2) + r14 * 10.0 * (2.0 + pi2))
        + r24 * (-70.0 * (26.0 + pi2) + r1 * 150.0 * (18.0 + pi2) - r12 * 100.0 * (10.0 + pi2) + r13 * 20.0 * (2.0 + pi2))
        + r25 * (15.0 * (18.0 + pi2) - r1 * 25.0 * (10.0 + pi2) + r12 * 10.0 * (2.0 + pi2))
        + r26 * (-10.0 - pi2 + r1 * (2.0 + pi2)))
    ca4mu = (r2 * (-1638.0 + r1 * 4158.0 - r12 * 3780.0 + r13 * 1470.0 - r14 * 225.0 + r15 * 9.0)
        + r22 * (4158.0 - r1 * 9450.0 + r12 * 7350.0 - r13 * 2250.0 + r14 * 225.0 - r15 * 3.0)
        + r23 * (-3780.0 + r1 * 7350.0 - r12 * 4500.0 + r13 * 900.0 - r14 * 30.0)
        + r24 * (1470.0 - r1 * 2250.0 + r12 * 900.0 - r13 * 60.0)
        + r25 * (-225.0 + r1 * 225.0 - r12 * 30.0)
        + r26 * (9.0 - r1 * 3.0))
    ca4r1 = (-84.0 + r1 * 252.0 - r12 * 280.0 + r13 * 140.0 - r14 * 30.0 + r15 * 2.0
        + r2  * (336.0 - r1 * 952.0 + r12 * 980.0 - r13 * 440.0 + r14 * 80.0 - r15 * 4.0)
        + r22 * (-532.0 + r1 * 1400.0 - r12 * 1300.0 + r13 * 500.0 - r14 * 70.0 + r15 * 2.0)
        + r23 * (420.0 - r1 * 1000.0 + r12 * 800.0 - r13 * 240.0 + r14 * 20.0)
        + r24 * (-170.0 + r1 * 350.0 - r12 * 220.0 + r13 * 40.0)
        + r25 * (32.0 - r1 * 52.0 + r12 * 20.0)
        + r26 * (-2.0 + r1 * 2.0))
    ca4r12 = (r2 * (-84.0 + r1 * 252.0 - r12 * 280.0 + r13 * 140.0 - r14 * 30.0 + r15 * 2.0)
        + r22 * (252.0 - r1 * 700.0 + r12 * 700.0 - r13 * 300.0 + r14 * 50.0 - r15 * 2.0)
        + r23 * (-280.0 + r1 * 700.0 - r12 * 600.0 + r13 * 200.0 - r14 * 20.0)
        + r24 * (140.0 - r1 * 300.0 + r12 * 200.0 - r13 * 40.0)
        + r25 * (-30.0 + r1 * 50.0 - r12 * 20.0)
        + r26 * (2.0 - r1 * 2.0))

    # the logarithmic structures are shared by all three Gegenbauer orders
    lr1 = L1mr1 - 2.0 * Lr2m1
    lr12 = L1mr12 + Lr2m12 - 2.0 * Lr2 * Lr2m1 + L1mr1 * (Lr2 - 2.0 * Lr2m1) + dilogr1 - 3.0 * dilog1mr2

    return -3.0 / (r2 * (r1 - r2)**7) * (
                (r1 - r2)**4 * (ca00 + ca0mu * Lmu + ca0r1 * lr1 + ca0r12 * lr12)
                + 6.0 * (r1 - r2)**2 * (ca20 + ca2mu * Lmu + ca2r1 * lr1 + ca2r12 * lr12) * a2pi
                + 15.0 * (ca40 + ca4mu * Lmu + ca4r1 * lr1 + ca4r12 * lr12) * a4pi
            )


###############################################################################
# f+ : twist 3
###############################################################################

def tw3p_theta_1mrho(r1, r2, lmu):
    l1 = np.log((r2 - r1) / (r2 - 1.0))
    l2 = lmu + np.log((r2 - 1.0) * (r2 - 1.0) / r2)

    return (r1 - r2 * (1.0 + r1 + r2) * l2) * l1 / (r2 * (r1 - r2))


def tw3p_theta_rhom1(r1, r2, lmu):
    logr2 = np.log(r2)
    l1 = np.log((1.0 - r1) / (r2 - r1))
    dl1 = pi2 / 6.0 + re_li2(1.0 / r2) + logr2 * (logr2 - np.log(r2 - 1.0))
    dl2 = (-re_li2(r1 / r2) + re_li2(r1) - 2.0 * re_li2((r2 - 1.0) / (r1 - 1.0))
        - logr2 * logr2 / 2.0 + logr2 * np.log(r2 - r1) - 2.0 * np.log((r2 - r1) / (1.0 - r1)) * np.log(r2 - 1.0))

    return (
            dl1 * (1.0 + r1 + r2) + dl2 * (4.0 * r1 - 1.0)
            + ((r1 + r2) * (r2 - 1.0) + (r1 * (2.0 - 3.0 * r2) + r2) * logr2) / (2.0 * r2)
            + l1 * (1.0 - 2.0 * r1 + lmu * (4.0 * r1 - 1.0))
        ) / (r2 - r1)


def tw3p_delta_rhom1(r1, r2, lmu):
    l1mr1 = np.log(1.0 - r1)
    lr2 = np.log(r2); lr2m1 = np.log(r2 - 1.0)
    dlr1 = re_li2(r1)
    dl1mr2 = re_li2(1.0 - r2)

    return (
            6.0 - 2.0 * r1 - pi2 / 6.0 * (1.0 + 4.0 * r1)
            + lr2 * (l1mr1 * r1 - lr2m1 * 2.0 * r1)
            + lr2m1 * (lr2m1 * (1.0 + 2.0 * r1) - 4.0 + 2.0 * r1 * (r2 - 1.0) / r2 - l1mr1 * 2.0 * r1 + lmu * (1.0 + r1))
            + lmu * 3.0 / 2.0 * (r1 - 3.0)
            + l1mr1 * (-l1mr1 + 2.0 + r1 + r1 / r2 - (1.0 + r1) * lmu)
            - dlr1 + (1.0 - 2.0 * r1) * dl1mr2
        ) / (r2 - r1)


def tw3sigma_theta_1mrho(r1, r2, lmu):
    lr2 = np.log(r2); lr2m1 = np.log(r2 - 1.0)
    lr2mr1 = np.log(r2 - r1)

    return (
            - 6.0 * (r1 * r1 + 2.0 * (r2 - 1.0) * r2 + r1 * (-1.0 + 2.0 * r2 - 2.0 * r2 * r2))
                / (r2 * (r1 - r2) * (r1 - r2))
            + lr2mr1 * ((lmu - lr2 + 2.0 * lr2m1) * 6.0 * (1.0 + r1 + r2) / (r1 - r2) - 6.0 * r1 / (r2 * (r1 - r2)))
            + lr2m1 * ((-2.0 * lr2m1 - lmu + lr2) * 6.0 * (1.0 + r1 + r2) / (r1 - r2)
                + 6.0 * (-2.0 * (r2 - 1.0) * r2 + r1 * r2 * (2.0 * r2 - 5.0) + r1 * r1 * (1.0 + 2.0 * r2))
                    / ((r2 - r1) * (r2 - r1) * r2)
            )
            + (lmu - lr2) * 6.0 * (r1 - 1.0) * (-1.0 + r1 + r2) / ((r2 - r1) * (r2 - r1))
        ) / (r2 - r1)


def tw3sigma_theta_rhom1(r1, r2, lmu):
    l1mr1 = np.log(1.0 - r1)
    lr2 = np.log(r2); lr2m1 = np.log(r2 - 1.0)
    lr2mr1 = np.log(r2 - r1)
    l1 = 2.0 * lr2m1 + lmu - lr2
    dl1 = re_li2(r1) - re_li2(r1 / r2) - 2.0 * re_li2((r2 - 1.0) / (r1 - 1.0))
    dl2 = re_li2(1.0 / r2) - l1 * l1

    return 3.0 * (
            - dl1 * 2.0 * (4.0 * r1 - 1.0) * (r1 - r2) * r2
            - dl2 * 2.0 * (r1 - r2) * r2 * (1.0 + r1 + r2)
            + l1 * (
                - l1 * (r1 - r2) * r2 * (5.0 + 4.0 * r2)
                + lr2mr1 * 2.0 * (4.0 * r1 - 1.0) * (r1 - r2) * r2
                - lr2m1 * 2.0 * (-5.0 + 5.0 * r1 - 3.0 * r2) * (r1 - r2) * r2
                - lmu * 2.0 * (-3.0 + 2.0 * r1 - 2.0 * r2) * (r1 - r2) * r2
                + r1 * (r2 - 1.0) * r2 - 5.0 * r2 * r2 + r1 * r1 * (2.0 + r2 - 2.0 * r2 * r2)
            )
            + lr2mr1 * (
                - 2.0 * (-1.0 + 2.0 * r1) * (r1 - r2) * r2
            )
            + lr2m1 * (
                lr2m1 * 4.0 * (r1 - r2) * (-2.0 + 3.0 * r1 - r2) * r2
                - l1mr1 * 4.0 * (4.0 * r1 - 1.0) * (r1 - r2) * r2
                + lmu * 2.0 * (-5.0 + 5.0 * r1 - 3.0 * r2) * (r1 - r2) * r2
                - 2.0 * r1 * (-1.0 + r2) * r2 + 2.0 * r2 * (2.0 + 3.0 * r2) + r1 * r1 * (-4.0 - 2.0 * r2 + 4.0 * r2 * r2)
            )
            + l1mr1 * (
                - lmu * 2.0 * (4.0 * r1 - 1.0) * (r1 - r2) * r2
                + 2.0 * (-1.0 + 2.0 * r1) * (r1 - r2) * r2
            )
            + lmu * (
                lmu * (-3.0 + 2.0 * r1 - 2.0 * r2) * (r1 - r2) * r2
                - r1 * (r2 - 1.0) * r2 + r2 * (2.0 + 3.0 * r2) + r1 * r1 * (-2.0 + r2 * (-1.0 + 2.0 * r2))
            )
            + (
                r2 * r2 * (pi2 - 3.0 + (3.0 + pi2) * r2)
                + r1 * (6.0 - (6.0 + pi2) * r2)
                - r1 * r1 * (3.0 + r2 * (pi2 - 9.0 + 6.0 * r2))
            ) / 3.0
        ) / ((r1 - r2)**3 * r2)


def tw3sigma_delta_rhom1(r1, r2, lmu):
    l1mr1 = np.log(1.0 - r1)
    lr2 = np.log(r2); lr2m1 = np.log(r2 - 1.0)
    l1 = 2.0 * lr2m1 + lmu - lr2
    l2 = l1mr1 - 2.0 * lr2m1
    dl1 = re_li2(r1) + l1mr1 * (l1mr1 + lmu)
    dl2 = re_li2(1.0 - r2) + lr2m1 * lr2m1

    return (
            dl1 * 6.0 * (r1 * (3.0 - 4.0 * r2) + r2)
            + dl2 * (-30.0 * r2 + 6.0 * r1 * (-7.0 + 2.0 * r1 + 10.0 * r2))
            + l1 * l2 * (-12.0 * r2 + 6.0 * r1 * (-2.0 + r1 + 3.0 * r2))
            + lr2m1 * (
                lmu * (-18.0 * r2 + 6.0 * r1 * (-5.0 + r1 + 7.0 * r2))
                - 12.0 * (r2 + r1 * (2.0 - r1 - 3.0 * r2 + r2 * r2)) / r2
            )
            - l1mr1 * 6.0 * ((-2.0 + r1) * r1 - 2.0 * r2 + r1 * (5.0 + r1) * r2 + (2.0 - 5.0 * r1) * r2 * r2) / r2
            + lmu * (-3.0 * r1 * (-17.0 + r1 - 5.0 * r2) + 9.0 * r2)
            + r1 * (-72.0 + pi2 * (-5.0 + 4.0 * r1)) + r2 * (6.0 * (-1.0 + r1) * r1 + pi2 * (-7.0 + 8.0 * r1))
            - 6.0 * (1.0 + 3.0 * r2)
        ) / ((r1 - r2) * (r1 - r2) * (r1 - r2))


###############################################################################
# f0 (tilde sum rule) : twist 2
###############################################################################

def tw2til_theta_1mrho(r1, r2, a2pi, a4pi):
    r12 = r1 * r1; r13 = r12 * r1; r14 = r12 * r12; r15 = r14 * r1; r16 = r13 * r13
    r22 = r2 * r2; r23 = r22 * r2; r24 = r22 * r22; r25 = r24 * r2

    ca0 = (-r1 + 2.0 * r12 - r13
        + r2 * (1.0 - r1 - r12 + r13)
        + r22 * (-1.0 + 2.0 * r1 - r12))
    ca2 = (-15.0 + 40.0 * r1 - 36.0 * r12 + 12.0 * r13 - r14
        + r2 * (35.0 - 88.0 * r1 + 72.0 * r12 - 20.0 * r13 + r14)
        + r22 * (-26.0 + 60.0 * r1 - 42.0 * r12 + 8.0 * r13)
        + r23 * (6.0 - 12.0 * r1 + 6.0 * r12))
    ca4 = (-210.0 + 756.0 * r1 - 1050.0 * r12 + 700.0 * r13 - 225.0 * r14 + 30.0 * r15 - r16
        + r2 * (714.0 - 2436.0 * r1 + 3150.0 * r12 - 1900.0 * r13 + 525.0 * r14 - 54.0 * r15 + r16)
        + r22 * (-924.0 + 2940.0 * r1 - 3450.0 * r12 + 1800.0 * r13 - 390.0 * r14 + 24.0 * r15)
        + r23 * (560.0 - 1620.0 * r1 + 1650.0 * r12 - 680.0 * r13 + 90.0 * r14)
        + r24 * (-155.0 + 390.0 * r1 - 315.0 * r12 + 80.0 * r13)
        + r25 * (15.0 - 30.0 * r1 + 15.0 * r12))

    return -6.0 / (r2 * (r1 - r2)**7) * (
                (r1 - r2)**3 * ca0 + (r1 - r2)**2 * ca2 * a2pi + ca4 * a4pi
            )


def tw2til_theta_rhom1(r1, r2, a2pi, a4pi):
    r12 = r1 * r1; r13 = r12 * r1; r14 = r12 * r12; r15 = r14 * r1
    r22 = r2 * r2; r23 = r22 * r2; r24 = r22 * r22; r25 = r24 * r2; r26 = r23 * r23; r27 = r24 * r23
    Lr2 = np.log(r2)

    ca00 = (1 - 2.0 * r1
        + r2 * (-1.0 + 4.0 * r1)
        + r22 * (-1.0 - 2.0 * r1)
        + r23)
    ca0r2 = -r2 * r1 + r22 * (1.0 + r1) - r23

    ca20 = ((15.0 - 40.0 * r1 + 36.0 * r12 - 12.0 * r13)
        + r2 * (-35.0 + 93.0 * r1 - 87.0 * r12 + 24.0 * r13)
        + r22 * (21.0 - 45.0 * r1 + 96.0 * r12 - 12.0 * r13)
        + r23 * (-6.0 - 29.0 * r1 - 45.0 * r12)
        + r24 * (-16.0 + 21.0 * r1)
        + r25 * (21.0))
    ca2r2 = (r2 * (-6 * r13)
        + r22 * (6.0 * r13 + 18.0 * r12)
        + r23 * (12.0 * r1 + 12.0 * r12)
        + r24 * (-24.0 - 12.0 * r1)
        + r25 * (-6.0))

    ca40 = (420.0 - 1512.0 * r1 + 2100.0 * r12 - 1400.0 * r13 + 450.0 * r14 - 60.0 * r15
        + r2  * (-1428.0 + 4935.0 * r1 - 6510.0 * r12 + 4080.0 * r13 - 1260.0 * r14 + 120.0 * r15)
        + r22 * (1785.0 - 5775.0 * r1 + 6900.0 * r12 - 3600.0 * r13 + 1590.0 * r14 - 60.0 * r15)
        + r23 * (-1015.0 + 2820.0 * r1 - 2040.0 * r12 + 2240.0 * r13 - 780.0 * r14)
        + r24 * (450.0 - 1200.0 * r1 - 1080.0 * r12 - 1320.0 * r13)
        + r25 * (-660.0 - 243.0 * r1 + 630.0 * r12)
        + r26 * (313.0 + 975.0 * r1)
        + r27 * (135.0))
    ca4r2 = (r2 * (-15.0 * r15)
        + r22 * (75.0 * r14 + 15.0 * r15)
        + r23 * (690.0 * r13 + 135.0 * r14)
        + r24 * (150.0 * r12 + 150.0 * r13)
        + r25 * (-705.0 * r1 - 150.0 * r12)
        + r26 * (-195.0 - 135.0 * r1)
        + r27 * (-15.0))

    return -6.0 / (r2 * (r1 - r2)**7) * ((r1 - r2)**4 * (ca00 + ca0r2 * Lr2)
            + (r1 - r2)**2 * (ca20 + ca2r2 * Lr2) * a2pi
            + (ca40 / 2.0 + ca4r2 * Lr2) * a4pi
            )


def tw2til_delta(r1, r2, a2pi, a4pi):
    r12 = r1 * r1; r13 = r12 * r1; r14 = r12 * r12; r15 = r13 * r12; r16 = r13 * r13; r17 = r14 * r13
    r22 = r2 * r2; r23 = r22 * r2; r24 = r22 * r22; r25 = r23 * r22; r26 = r23 * r23
    L1mr1 = np.log(1.0 - r1)

    ca00 = r1 - r12 + r2 * (-1.0 + r12) + r22 * (1.0 - r1)
    ca0r1 = (r1 - 2.0 * r12 + r13
        + r2 * (-1.0 + r1 + r12 - r13)
        + r22 * (1.0 - 2 * r1 + r12))

    ca20 = (5.0 * r1 - 10.0 * r12 + 6.0 * r13 - r14
        + r2 * (-5.0 + 12.0 * r12 - 8.0 * r13 + r14)
        + r22 * (10.0 - 12.0 * r1 + 2.0 * r13)
        + r23 * (-6.0 + 8.0 * r1 - 2.0 * r12)
        + r24 * (1.0 - r1))
    ca2r1 = (5.0 * r1 - 15.0 * r12 + 16.0 * r13 - 7.0 * r14 + r15
        + r2 * (-5.0 + 5.0 * r1 + 12.0 * r12 - 20.0 * r13 + 9.0 * r14 - r15)
        + r22 * (10.0 - 22.0 * r1 + 12.0 * r12 + 2.0 * r13 - 2.0 * r14)
        + r23 * (-6.0 + 14.0 * r1 - 10.0 * r12 + 2.0 * r13)
        + r24 * (1.0 - 2.0 * r1 + r12))

    ca40 = (42.0 * r1 - 126.0 * r12 + 140.0 * r13 - 70.0 * r14 + 15.0 * r15 - r16
        + r2 * (-42.0 + 210.0 * r12 - 280.0 * r13 + 135.0 * r14 - 24.0 * r15 + r16)
        + r22 * (126.0 - 210.0 * r1 + 150.0 * r13 - 75.0 * r14 + 9.0 * r15)
        + r23 * (-140.0 + 280.0 * r1 - 150.0 * r12 + 10.0 * r14)
        + r24 * (70.0 - 135.0 * r1 + 75.0 * r12 - 10.0 * r13)
        + r25 * (-15.0 + 24.0 * r1 - 9.0 * r12)
        + r26 * (1.0 - r1))
    ca4r1 = (42.0 * r1 - 168.0 * r12 + 266.0 * r13 - 210.0 * r14 + 85.0 * r15 - 16.0 * r16 + r17
        + r2 * (-42.0 + 42.0 * r1 + 210.0 * r12 - 490.0 * r13 + 415.0 * r14 - 159.0 * r15 + 25.0 * r16 - r17)
        + r22 * (126.0 - 336.0 * r1 + 210.0 * r12 + 150.0 * r13 - 225.0 * r14 + 84.0 * r15 - 9.0 * r16)
        + r23 * (-140.0 + 420.0 * r1 - 430.0 * r12 + 150.0 * r13 + 10.0 * r14 - 10.0 * r15)
        + r24 * (70.0 - 205.0 * r1 + 210.0 * r12 - 85.0 * r13 + 10.0 * r14)
        + r25 * (-15.0 + 39.0 * r1 - 33.0 * r12 + 9.0 * r13)
        + r26 * (1.0 - 2.0 * r1 + r12))

    return -6.0 / (r1 * r1 * (r1 - r2)**7) * (
                (r1 - r2)**4 * (ca00 * r1 + ca0r1 * L1mr1)
                + 6.0 * (r1 - r2)**2 * (ca20 * r1 + ca2r1 * L1mr1) * a2pi
                + 15.0 * (ca40 * r1 + ca4r1 * L1mr1) * a4pi
            )


###############################################################################
# f0 (tilde sum rule) : twist 3
###############################################################################

def tw3ptil_theta_1mrho(r1, r2, lmu):
    l1 = np.log((r2 - 1.0) / (r2 - r1))
    l2 = lmu + np.log((r2 - 1.0) * (r2 - 1.0) / r2)

    return 2.0 * l1 * (r2 * l2 - 1.0)


def tw3ptil_theta_rhom1(r1, r2, lmu):
    logr1 = np.log(np.abs(r1))
    logr2 = np.log(r2)
    log1mr1 = np.log(1.0 - r1)
    logr2m1 = np.log(r2 - 1.0)
    logr2mr1 = np.log(r2 - r1)
    dl1 = (-1.0 - 5.0 * pi2 / 3.0 + 2.0 * (re_li2(1.0 / r2) + 2.0 * re_li2(1.0 / r1) + 2.0 * re_li2(r2)
        - 2.0 * re_li2(r2 / r1) + 4.0 * re_li2((r2 - 1.0) / (r1 - 1.0)))) * r1 * r2 + r1
    dl2 = ((3.0 + 4.0 * logr1 + 2.0 * logr2m1 - 4.0 * logr2mr1) * r1 - 2.0) * r2 - 2.0 * r1
    dl3 = 8.0 * (logr2mr1 - log1mr1) * r1 * r2
    dl4 = 2.0 * ((1.0 - 2.0 * lmu) * r1 - 1.0) * r2
    dl5 = 2.0 * ((-1.0 + 2.0 * lmu) * r1 + 1.0) * r2

    return (dl1 + dl2 * logr2 + dl3 * logr2m1 + dl4 * log1mr1 + dl5 * logr2mr1) / r1


def tw3ptil_delta_rhom1(r1, r2, lmu):
    r12 = r1 * r1
    logr2 = np.log(r2)
    logr2m1 = np.log(r2 - 1.0)
    log1mr1 = np.log(1.0 - r1)
    l1 = np.log((r2 - 1.0) / (1.0 - r1))
    dl1 = (3.0 + 4.0 * pi2 / 3.0 - 2.0 * lmu + 4.0 * re_li2(1.0 - r2)) * r12 * r2 + r1 * r2
    dl2 = (-2.0 * r12 + (1.0 - 2.0 * r1 + r12) * r2)
    dl3 = (4.0 - (6.0 + 4.0 * l1) * r2) * r12
    dl4 = 2.0 * r12 * r2 * (logr2m1 + l1)
    dl5 = 2.0 * r12 * r2 * (1 - lmu)

    return (dl1 + dl2 * log1mr1 + dl3 * logr2m1 + dl4 * logr2 + dl5 * l1) / r12


def tw3sigmatil_theta_1mrho(r1, r2, lmu):
    lr2 = np.log(r2); lr2m1 = np.log(r2 - 1.0)
    lr2mr1 = np.log(r2 - r1)

    return - 6.0 * ((r1 - r2) * (lr2mr1 - lr2m1) + r1 - 1.0) * (r2 * (lmu + 2.0 * lr2m1 - lr2) - 1.0)


def tw3sigmatil_theta_rhom1(r1, r2, lmu):
    r12 = r1 * r1; r22 = r2 * r2
    lr1 = np.log(np.abs(r1)); l1mr1 = np.log(1.0 - r1)
    lr2 = np.log(r2); lr2m1 = np.log(r2 - 1.0)
    lr2mr1 = np.log(r2 - r1)
    dil = -2.0 * (2.0 * re_li2(1 / r1) + 4.0 * re_li2((r2 - 1.0) / (r1 - 1.0)) + re_li2(1 / r2) + 2.0 * re_li2(r2)
        - 2.0 * re_li2(r2 / r1) + 4.0 * np.log((r1 - r2) / (r1 - 1)) * np.log(r2 - 1.0)) * (r2 - r1) * r2
    dl1 = -(r2 - 1.0) * (2.0 - r2 + r1 * (-1.0 + 2.0 * r2))
    dl2 = ((r12 * (r2 - 2.0) - r1 * (r2 - 2.0) * r2 + 2.0 * r22) / r1 + 2.0 * (r2 - r1) * r2 * (2.0 * (lr2mr1 - lr1) - lr2m1)) * lr2
    dl3 = -2.0 * (r1 - 1.0) * r2 * (r2 - r1) * l1mr1 / r1
    dl4 = 2.0 * (r1 - 1.0) * r2 * (r2 - r1) * lr2mr1 / r1
    dl5 = 4.0 * (l1mr1 - lr2mr1) * (r2 - r1) * r2
    dl6 = 5.0 * (r2 - r1) * r2 / 3.0

    return 3.0 * (dl1 + dl2 + dl3 + dl4 + dl5 * lmu + pi2 * dl6 + dil)


def tw3sigmatil_delta_rhom1(r1, r2, lmu):
    r12 = r1 * r1; r13 = r12 * r1; r22 = r2 * r2
    l1mr1 = np.log(1.0 - r1)
    lr2 = np.log(r2); lr2m1 = np.log(r2 - 1.0)
    dl1 = (- 17.0 * r1 - r12 + (1.0 - r1 + 2.0 * r12) * r2) / r1
    dl2 = 2.0 * (2.0 * r1 + r2 - 3.0) / 3.0
    dl3 = -4.0 * (-2.0 + r1 + r2) * (-1.0 + r2 * (2.0 * lr2m1 - lr2)) * lr2m1
    dl4 = (4.0 * r12 - 2.0 * r13 + (-r13 - 4.0 * r12 + r1) * r2 + (3.0 * r12 - 2.0 * r1 + 1.0) * r22
            + 2.0 * r12 * r2 * (-2.0 + r1 + r2) * (2.0 * lr2m1 - lr2)) * l1mr1 / r12
    dl5 = -4.0 * (r2 - 1.0) * l1mr1 * l1mr1 + 4.0 * (r1 + 2.0 * r2 - 3.0) * lr2m1 * lr2m1
    dl6 = 2.0 * (5.0 + r2 - (l1mr1 - lr2m1) * (r2 - r1))
    dl7 = 4.0 * (-3.0 + r1 + 2.0 * r2) * re_li2(1.0 - r2) - 4.0 * (r2 - 1.0) * re_li2(r1)

    return 3.0 * ((dl1 + pi2 * dl2 + dl5 + dl6 * lmu + dl7) * r2 + dl3 + dl4)


###############################################################################
# fT : twist 2
###############################################################################

#--below this |r1| the logarithms log(1-r1)/r1 are replaced by their Taylor series
SQRT_EPS = np.sqrt(np.finfo(float).eps)


def _log1mr1_over_r1_series(r1):
    """
    Taylor series of log(1 - r1)/r1 around r1 = 0.
    """
    return - 1. - r1 / 2. - r1 * r1 / 3. - r1 * r1 * r1 / 4.


def tw2T_theta_1mrho(r1, r2, mc2, mu2, a2pi, a4pi):
    r12 = r1 * r1; r13 = r12 * r1; r14 = r12 * r12; r15 = r14 * r1
    r22 = r2 * r2; r23 = r22 * r2; r24 = r22 * r22; r25 = r24 * r2
    L = np.log((r2 - 1.0)**2 * mc2 / (mu2 * r2))

    ca0 = (r1 - r2)**4 * (-r1 * 2.0 + r2 * (1.0 + r1))
    ca2 = (r1 - r2)**2 * (-2.0 * (r1 * 55.0 - r12 * 65.0 + 16.0 * r13)
            + r2 * (95.0 - r1 * 15.0 - r12 * 45.0 + r13)
            + r22 * 2.0 * (-35.0 + r1 * 13.0 + r12 * 4.0)
            + r23 * 6.0 * (1.0 + r1))
    ca4 = ((-2877.0 * r1 + 6258.0 * r12 - r13 * 4592.0 + r14 * 1288.0 - r15 * 107.0)
            + r2  * (2667.0 - r1 * 462.0 - r12 * 5502.0 + r13 * 4228.0 - r14 * 782.0 + r15)
            + r22 * 6.0 * (-791.0 + r1 * 889.0 - r12 * 21.0 - r13 * 131.0 + r14 * 4.0)
            + r23 * 10.0 * (266.0 - r1 * 280.0 + r12 * 35.0 + r13 * 9.0)
            + r24 * 10.0 * (-49.0 + r1 * 26.0 + r12 * 8.0)
            + r25 * 15.0 * (1.0 + r1))

    cb0 = (r1 - r2)**4 * (-1.0 - r1 + 2.0 * r2)
    cb2 = (r1 - r2)**2 * (-15.0 - r1 * 85.0 + r12 * 119.0 - r13 * 31.0
            + r2 * 2.0 * (65.0 - r1 * 34.0 - r12 * 13.0)
            + r22 * 12.0 * (-8.0 + r1 * 5.0)
            + r23 * 12.0)
    cb4 = ((-210.0 - r1 * 2331.0 + r12 * 5754.0 - r13 * 4396.0 + r14 * 1259.0 - r15 * 106.0)
            + r2  * 3.0 * (1127.0 - r1 * 728.0 - r12 * 1358.0 + r13 * 1252.0 - r14 * 243.0)
            + r22 * 30.0 * (-189.0 + r1 * 245.0 - r12 * 52.0 - r13 * 14.0)
            + r23 * 20.0 * (161.0 - r1 * 193.0 + 47.0 * r12)
            + r24 * 15.0 * (-43.0 + 33.0 * r1)
            + r25 * 30.0)

    return - (
            ca0 + ca2 * a2pi + ca4 * a4pi - L * r2 * (cb0 + cb2 * a2pi + cb4 * a4pi)
        ) * (r1 - 1.0) * (r2 - 1.0) * 3.0 / ((r1 - r2)**8 * r2)


def tw2T_theta_rhom1(r1, r2, mc2, mu2, a2pi, a4pi):
    r12 = r1 * r1; r13 = r12 * r1; r14 = r12 * r12; r15 = r14 * r1; r16 = r13 * r13
    r22 = r2 * r2; r23 = r22 * r2; r24 = r22 * r22; r25 = r24 * r2; r26 = r23 * r23; r27 = r24 * r23
    Lr2 = np.log(r2); Lr2m1 = np.log(r2 - 1.0); Lmu = np.log(mc2 / mu2)

    C0 = r2 - 1.0
    Clr2 = 60.0 * r2
    Cl = 60.0 * (r1 - 1.0) * (r2 - 1.0) * r2

    ca00 = -60.0 * (r1 * 2.0
        + r2  * (-1.0 - r1 * 12.0 + r12 * 4.0)
        + r22 * 2.0 * (5.0 - r1)
        + r23 * (-1.0))
    ca0mu = -1.0 + 2.0 * r1 - r2
    ca0r2 = 1.0 + r12 + r2 * (-3.0 - r1 * 2.0 - r12 * 3.0) + r22 * (4.0 + r1 * 2.0)
    ca0r2m1 = 2.0 * ca0mu

    ca20 = -5.0 * (24.0 * (r1 * 55.0 - r12 * 90.0 + r13 * 36.0)
        + r2 * (-1140.0 - r1 * 7475.0 + r12 * 13780.0 - r13 * 5544.0 + r14 * 288.0)
        + r22 * (8915.0 - r1 * 3467.0 - r12 * 8672.0 + r13 * 2520.0)
        + r23 * (-10097.0 + r1 * 10501.0 - r12 * 836.0)
        + r24 * 5.0 * (-351.0 * r1 + 599.0)
        + r25 * (-37.0))
    ca2mu = (-15.0 + r1 * 130.0 - r12 * 96.0 + r13 * 12.0
        + r2 * (-85.0 - r1 * 68.0 + r12 * 60)
        + r22 * (119.0 - r1 * 26.0)
        + r23 * (-31.0))
    ca2r2 = (15.0 + r1 * 70.0 - r12 * 144.0 + r13 * 60.0 + r14 * 6.0
        + r2 * (-145.0 + r1 * 128.0 + r12 * 12.0 - r13 * 24.0 - r14 * 18.0)
        + r22 * (166.0 - r1 * 204.0 + r12 * 54.0 - r13 * 72.0)
        + r23 * (-18.0 + r1 * 40.0 + r12 * 38.0)
        + r24 * (-1.0 + r1 * 37.0))
    ca2r2m1 = 2.0 * ca2mu

    ca40 = 2.0 * (-30.0 * (r1 * 2877.0 - r12 * 7875.0 + r13 * 7700.0 - r14 * 3150.0 + r15 * 450.0)
        + r2  * (80010.0 + r1 * 544677.0 - r12 * 1770111.0 - 25.0 * (- r13 * 69041.0 + 2.0 * (r14 * 13331.0 - r15 * 1746.0 + r16 * 36.0)))
        + r22 * (-743127.0 + r1 * 499947.0 + r12 * 1581699.0 - 25.0 * (r13 * 78527.0 - r14 * 27488.0 + r15 * 1944.0))
        + r23 * (1406664.0 - r1 * 2265963.0 + r12 * 539679.0 + 25.0 * (r13 * 19705.0 - r14 * 4702.0))
        + r24 * (-1010261.0 + r1 * 1718047.0 - r12 * 769551.0 + r13 * 40025.0)
        + r25 * (290999.0 + 2.0 * (- r1 * 215674.0 + 51507.0 * r12))
        + r26 * 2.0 * (- 14213.0 + 9245.0 * r1)
        + r27 * 121.0)
    ca4mu = (-210.0 + r1 * 3381.0 - r12 * 5670.0 + r13 * 3220.0 - r14 * 645.0 + r15 * 30.0
        + r2 * (-2331.0 - r1 * 2184.0 + r12 * 7350.0 - r13 * 3860.0 + r14 * 495.0)
        + r22 * (5754.0 - r1 * 4074.0 - r12 * 1560.0 + r13 * 940.0)
        + r23 * (-4396.0 + r1 * 3756.0 - r12 * 420.0)
        + r24 * (1259.0 - r1 * 729.0)
        + r25 * (-106.0))
    ca4r2 = (210.0 + r1 * 2121.0 - r12 * 6825.0 + r13 * 7000.0 - r14 * 2925.0 + r15 * 420.0 + r16 * 15.0
        + r2 * (- 3591.0 + r1 * 3444.0 + r12 * 5565.0 - r13 * 7900.0 + r14 * 2475.0 - r15 * 90.0 - r16 * 45.0)
        + r22 * (7791.0 - r1 * 14175.0 + r12 * 7020.0 - r13 * 1500.0 + r14 * 270.0 - r15 * 630.0)
        + r23 * (-5740.0 + r1 * 10020.0 - r12 * 5520.0 + r13 * 1480.0 - r14 * 1090.0)
        + r24 * (1135.0 - r1 * 555.0 + r12 * 180.0 + r13 * 570.0)
        + r25 * (270.0 - r1 * 354.0 + r12 * 864.0)
        + r26 * (-31.0 + 121.0 * r1))
    ca4r2m1 = 2.0 * ca4mu

    return -1.0 / (20.0 * r2 * (r1 - r2)**8) * ((r1 - r2)**4 * (C0 * ca00 + Cl * ca0mu * Lmu + Clr2 * ca0r2 * Lr2 + Cl * ca0r2m1 * Lr2m1)
        + (r1 - r2)**2 * (C0 * ca20 + Cl * ca2mu * Lmu + Clr2 * ca2r2 * Lr2 + Cl * ca2r2m1 * Lr2m1) * a2pi
        + (C0 * ca40 + Cl * ca4mu * Lmu + Clr2 * ca4r2 * Lr2 + Cl * ca4r2m1 * Lr2m1) * a4pi)


def tw2T_delta(r1, r2, mc2, mu2, a2pi, a4pi):
    r12 = r1 * r1; r13 = r12 * r1; r14 = r12 * r12; r15 = r13 * r12; r16 = r13 * r13
    r22 = r2 * r2; r23 = r22 * r2; r24 = r22 * r22; r25 = r23 * r22; r26 = r23 * r23
    Lr2 = np.log(r2); Lr2m1 = np.log(r2 - 1.0); Lmu = np.log(mc2 / mu2)
    dilogr1 = re_li2(r1)
    dilog1mr2 = re_li2(1.0 - r2)

    ca00 = r2 * (-14.0 + 6.0 * r1 + (6.0 + 2.0 * r1) * r2 + pi2 * (-1.0 + r1 + (1.0 - r1) * r2))
    ca0mu = r2 * (11.0 - 5.0 * r1 + (-5.0 - r1) * r2)
    ca01mr1 = 2.0 * (r1 - r12 + (1.0 - 4.0 * r1 + 3.0 * r12) * r2 + (-1.0 + 3.0 * r1 - 2.0 * r12) * r22)
    ca0r2m1 = 4.0 * (-1.0 + r1 + (2.0 - 2.0 * r1) * r2 + (-1.0 + 1.0 * r1) * r22)
    ca0log2 = 2.0 * r2 * (1.0 - r1 + (-1.0 + r1) * r2)
    ca0dlr1 = 2.0 * r2 * (1.0 - r1 + (-1.0 + r1) * r2)
    ca0dl1mr2 = 2.0 * r2 * (-3.0 + 3.0 * r1 + (3.0 - 3.0 * r1) * r2)

    ca20 = (r2 * (10.0 * (pi2 + 30.0) - 20.0 * (pi2 + 22.0) * r1 + 12.0 * (pi2 + 14.0) * r12 - 2.0 * (pi2 + 6.0) * r13)
        + r22 * (-20.0 * (pi2 + 22.0) + 36.0 * (pi2 + 14.0) * r1 - 18.0 * (pi2 + 6.0) * r12 + 2.0 * (pi2 - 2.0) * r13)
        + r23 * (12.0 * (pi2 + 14.0) - 18.0 * (pi2 + 6.0) * r1 + 6.0 * (pi2 - 2.0) * r12)
        + r24 * (-2.0 * (pi2 + 6.0) + 2.0 * (pi2 - 2.0) * r1))
    ca2mu = (r2 * (-230.0 + 340.0 * r1 - 132.0 * r12 + 10.0 * r13)
        + r22 * (340.0 - 396.0 * r1 + 90.0 * r12 + 2.0 * r13)
        + r23 * (-132.0 + 90.0 * r1 + 6.0 * r12)
        + r24 * (10.0 + 2.0 * r1))
    ca2l2 = (r2 * (-10.0 + 20.0 * r1 - 12.0 * r12 + 2.0 * r13)
        + r22 * (20.0 - 36.0 * r1 + 18.0 * r12 - 2.0 * r13)
        + r23 * (-12.0 + 18.0 * r1 - 6.0 * r12)
        + r24 * (2.0 - 2.0 * r1))
    ca2r2m1 = (40.0 - 80.0 * r1 + 48.0 * r12 - 8.0 * r13
        + r2 * (-120.0 + 224.0 * r1 - 120.0 * r12 + 16.0 * r13)
        + r22 * (128.0 - 216.0 * r1 + 96.0 * r12 - 8.0 * r13)
        + r23 * (-56.0 + 80.0 * r1 - 24.0 * r12)
        + r24 * (8.0 - 8.0 * r1))
    ca21mr1 = (-20.0 * r1 + 40.0 * r12 - 24.0 * r13 + 4.0 * r14
        + r2 * (-20.0 + 120.0 * r1 - 176.0 * r12 + 88.0 * r13 - 12.0 * r14)
        + r22 * (40.0 - 176.0 * r1 + 216.0 * r12 - 88.0 * r13 + 8.0 * r14)
        + r23 * (-24.0 + 88.0 * r1 - 88.0 * r12 + 24.0 * r13)
        + r24 * (4.0 - 12.0 * r1 + 8.0 * r12))

    ca40 = (r2 * (42.0 * (46.0 + pi2) - 126.0 * (38.0 + pi2) * r1 + 140.0 * (30.0 + pi2) * r12 - 70.0 * (22.0 + pi2) * r13 + 15.0 * (14.0 + pi2) * r14 - (6.0 + pi2) * r15)
        + r22 * (-126.0 * (38.0 + pi2) + 350.0 * (30.0 + pi2) * r1 - 350.0 * (22.0 + pi2) * r12 + 150.0 * (14.0 + pi2) * r13 - 25.0 * (6.0 + pi2) * r14 + (-2.0 + pi2) * r15)
        + r23 * (140.0 * (30.0 + pi2) - 350.0 * (22.0 + pi2) * r1 + 300.0 * (14.0 + pi2) * r12 - 100.0 * (6.0 + pi2) * r13 + 10.0 * (-2.0 + pi2) * r14)
        + r24 * (-70.0 * (22.0 + pi2) + 150.0 * (14.0 + pi2) * r1 - 100.0 * (6.0 + pi2) * r12 + 20.0 * (-2.0 + pi2) * r13)
        + r25 * (15.0 * (14.0 + pi2) - 25.0 * (6.0 + pi2) * r1 + 10.0 * (-2.0 + pi2) * r12)
        + r26 * (-6.0 - pi2 + (-2.0 + pi2) * r1))
    ca4mu = (r2 * (-1470.0 + 3654.0 * r1 - 3220.0 * r12 + 1190.0 * r13 - 165.0 * r14 + 5.0 * r15)
        + r22 * (3654.0 - 8050.0 * r1 + 5950.0 * r12 - 1650.0 * r13 + 125.0 * r14 + r15)
        + r23 * (-3220.0 + 5950.0 * r1 - 3300.0 * r12 + 500.0 * r13 + 10.0 * r14)
        + r24 * (1190.0 - 1650.0 * r1 + 500.0 * r12 + 20.0 * r13)
        + r25 * (-165.0 + 125.0 * r1 + 10.0 * r12)
        + r26 * (5.0 + r1))
    ca4l2 = (r2 * (-42.0 + 126.0 * r1 - 140.0 * r12 + 70.0 * r13 - 15.0 * r14 + r15)
        + r22 * (126.0 - 350.0 * r1 + 350.0 * r12 - 150.0 * r13 + 25.0 * r14 - r15)
        + r23 * (-140.0 + 350.0 * r1 - 300.0 * r12 + 100.0 * r13 - 10.0 * r14)
        + r24 * (70.0 - 150.0 * r1 + 100.0 * r12 - 20.0 * r13)
        + r25 * (-15.0 + 25.0 * r1 - 10.0 * r12)
        + r26 * (1.0 - r1))
    ca4r2m1 = (168.0 - 504.0 * r1 + 560.0 * r12 - 280.0 * r13 + 60.0 * r14 - 4.0 * r15
        + r2 * (-672.0 + 1904.0 * r1 - 1960.0 * r12 + 880.0 * r13 - 160.0 * r14 + 8.0 * r15)
        + r22 * (1064.0 - 2800.0 * r1 + 2600.0 * r12 - 1000.0 * r13 + 140.0 * r14 - 4.0 * r15)
        + r23 * (-840.0 + 2000.0 * r1 - 1600.0 * r12 + 480.0 * r13 - 40.0 * r14)
        + r24 * (340.0 - 700.0 * r1 + 440.0 * r12 - 80.0 * r13)
        + r25 * (-64.0 + 104.0 * r1 - 40.0 * r12)
        + r26 * (4.0 - 4.0 * r1))
    ca41mr1 = (-84.0 * r1 + 252.0 * r12 - 280.0 * r13 + 140.0 * r14 - 30.0 * r15 + 2.0 * r16
        + r2 * (-84.0 + 672.0 * r1 - 1484.0 * r12 + 1400.0 * r13 - 610.0 * r14 + 112.0 * r15 - 6.0 * r16)
        + r22 * (252.0 - 1484.0 * r1 + 2800.0 * r12 - 2300.0 * r13 + 850.0 * r14 - 122.0 * r15 + 4.0 * r16)
        + r23 * (-280.0 + 1400.0 * r1 - 2300.0 * r12 + 1600.0 * r13 - 460.0 * r14 + 40.0 * r15)
        + r24 * (140.0 - 610.0 * r1 + 850.0 * r12 - 460.0 * r13 + 80.0 * r14)
        + r25 * (-30.0 + 112.0 * r1 - 122.0 * r12 + 40.0 * r13)
        + r26 * (2.0 - 6.0 * r1 + 4.0 * r12))

    #--Lr1 stands for log(1 - r1)/r1, so that log(1 - r1) = Lr1 * r1
    if np.abs(r1) < SQRT_EPS:
        Lr1 = _log1mr1_over_r1_series(r1)
    else:
        Lr1 = np.log(1.0 - r1) / r1
    L1mr1 = Lr1 * r1

    lsq = 2.0 * (L1mr1 - Lr2m1)**2 - 4.0 * Lr2m1 * Lr2 + 2.0 * L1mr1 * Lr2 + 2.0 * dilogr1 - 6.0 * dilog1mr2

    return -3.0 / (r2 * (r1 - r2)**7) * (
                (r1 - r2)**4 * (ca00 + ca0mu * Lmu + ca01mr1 * Lr1 + ca0r2m1 * Lr2m1
                    + ca0log2 * (L1mr1 * (L1mr1 + Lr2 - 2.0 * Lr2m1) + Lr2m1 * (Lr2m1 - 2.0 * Lr2)) + ca0dlr1 * dilogr1 + ca0dl1mr2 * dilog1mr2)
                - 3.0 * (r1 - r2)**2 * (ca20 + ca2mu * Lmu + ca21mr1 * Lr1 + ca2r2m1 * Lr2m1 + ca2l2 * lsq) * a2pi
                - 15.0 * (ca40 + ca4mu * Lmu + ca4r2m1 * Lr2m1 + ca41mr1 * Lr1 + ca4l2 * lsq) * a4pi
            )


###############################################################################
# fT : twist 3
###############################################################################

def tw3pT_theta_1mrho(r1, r2, lmu):
    lr2 = np.log(r2); lr2m1 = np.log(r2 - 1.0)
    l = np.log((r2 - r1) / (r2 - 1.0))

    return l * (-1.0 + 6.0 * lr2m1 - 3.0 * lr2 + 3.0 * lmu)


def tw3pT_theta_rhom1(r1, r2, lmu):
    lr2 = np.log(r2); lr2m1 = np.log(r2 - 1.0)
    l1mr1 = np.log(1.0 - r1)
    lr2mr1 = np.log(r2 - r1)
    l = np.log((r1 - r2) / (r1 - 1.0))

    if np.abs(r1) < SQRT_EPS:
        r12 = r1 * r1; r13 = r12 * r1; r14 = r13 * r1
        r22 = r2 * r2; r23 = r22 * r2; r24 = r23 * r2
        dl = (- 6.0 * re_li2(1.0 - r2) + 3.0 * re_li2(1.0 / r2) - pi2 + 3.0 * lr2 * (3.0 * lr2 / 2.0 - lr2m1)
            + 3.0 * r1 * (r2 + (2.0 * r2 - 1.0) * lr2 - 1.0) / r2
            + 3.0 * r12 * ((4.0 * r22 - 2.0) * lr2 + (r2 - 1.0) * (5.0 * r2 + 1.0)) / (4.0 * r22)
            + r13 * ((6.0 * r23 - 3.0) * lr2 + (r2 - 1.0) * (2.0 * r2 * (5.0 * r2 + 2.0) + 1.0)) / (3.0 * r23)
            + r14 * (12.0 * (2.0 * r24 - 1.0) * lr2 + (r2 - 1.0) * (r2 * (r2 * (47.0 * r2 + 23.0) + 11.0) + 3.0)) / (16.0 * r24))
    else:
        lr1 = np.log(np.abs(r1))
        dl = - 3.0 * (re_li2(1.0 / r1) + re_li2(r2) - re_li2(r2 / r1) + 2.0 * re_li2((r2 - 1.0) / (r1 - 1.0))
            + lr2 * (lr1 + lr2m1 - lr2mr1 - lr2 / 2.0))

    return 3.0 * pi2 / 2.0 - 2.0 * lr2 + 3.0 * lmu * (l1mr1 - lr2mr1) + l * (1.0 - 6.0 * lr2m1) + dl


def tw3pT_delta_rhom1(r1, r2, lmu):
    lr2 = np.log(r2); lr2m1 = np.log(r2 - 1.0)
    l = np.log((r2 - 1.0) / (1.0 - r1))
    dl = - re_li2(r1) - re_li2(1.0 - r2)

    if np.abs(r1) < SQRT_EPS:
        Lr1 = _log1mr1_over_r1_series(r1)
        l1mr1 = Lr1 * r1
        #--(4 - 1/r1 + 1/r2 - l1mr1) * l1mr1 without the 1/r1
        l1mr1_term = (-1.0 + (4.0 + 1.0 / r2) * r1 - l1mr1 * r1) * Lr1
    else:
        l1mr1 = np.log(1.0 - r1)
        l1mr1_term = (4.0 - 1.0 / r1 + 1.0 / r2 - l1mr1) * l1mr1

    return (-5.0 * pi2 / 6.0 + l1mr1_term + (-2.0 - 2.0 / r2 - 2.0 * l1mr1 + 3.0 * lr2m1) * lr2m1
            + (l1mr1 - 2.0 * lr2m1) * lr2 + 2.0 * l * lmu + dl)


def tw3sigmaT_theta_1mrho(r1, r2, lmu):
    lr2 = np.log(r2); lr2m1 = np.log(r2 - 1.0)
    lr2mr1 = np.log(r2 - r1)

    return 3.0 * ((r1 - 1.0) * (- 4.0 + r2 * (3.0 - lr2 + lmu + 2.0 * lr2m1))
            + (r1 - r2) * r2 * (lr2m1 * (1.0 + 3.0 * lr2 - 6.0 * lr2m1 + 6.0 * lr2mr1 - 3.0 * lmu)
            + lr2mr1 * (- 1.0 - 3.0 * lr2 + 3.0 * lmu)))


def tw3sigmaT_theta_rhom1(r1, r2, lmu):
    r22 = r2 * r2
    lr2 = np.log(r2); lr2m1 = np.log(r2 - 1.0)
    l1mr1 = np.log(1.0 - r1)
    lr2mr1 = np.log(r2 - r1)

    if np.abs(r1) < SQRT_EPS:
        r12 = r1 * r1; r13 = r12 * r1; r14 = r13 * r1
        r23 = r22 * r2
        dl = (- r22 * (6.0 * re_li2(1.0 - r2) - 3.0 * re_li2(1.0 / r2) + pi2)
            + r1 * r2 * (6.0 * re_li2(1.0 - r2) - 3.0 * re_li2(1.0 / r2) + 3.0 * r2 + 6.0 * r2 * lr2 + pi2 - 3.0)
            + r12 * 3.0 * (3.0 - 8.0 * r2 + 5.0 * r2 + 4.0 * (r2 - 2.0) * r2 * lr2) / 4.0
            + r13 * (5.0 / (4.0 * r2) + 6.0 - 69.0 * r2 / 4.0 + 10.0 * r22 + 3.0 * (2.0 * r2 - 3.0) * r2 * lr2) / 3.0
            + r14 * ((r2 - 1.0) * (r2 * (r2 * (141.0 * r2 - 91.0) - 31.0) - 7.0) + 24.0 * (3.0 * r2 - 4.0) * r23 * lr2) / (48.0 * r22))
    else:
        lr1 = np.log(np.abs(r1))
        dl = r2 * (r1 - r2) * 3.0 * (re_li2(1.0 / r1) + re_li2(r2) - re_li2(r2 / r1)
            + 2.0 * re_li2((r2 - 1.0) / (r1 - 1.0)) + lr2 * lr1)

    return - 3.0 * (4.0 - 9.0 * r2 + 5.0 * r22
        - lr2 * r2 * (- 3.0 + 2.0 * r2 - r1 * (2 * r2 - 3.0)) - 2.0 * lr2m1 * r2 * (r2 - 1.0) - lmu * r2 * (r2 - 1.0)
        - r2 * (r1 - r2) * (6.0 * lr2 * (lr2mr1 - lr2m1 + lr2 / 2.0) + 12.0 * lr2m1 * (l1mr1 - lr2mr1)
        + 2.0 * lr2mr1 * (1.0 - 3.0 * lmu) + 2.0 * l1mr1 * (-1.0 + 3.0 * lmu) + 3.0 * pi2) / 2.0
        + dl)


def tw3sigmaT_delta_rhom1(r1, r2, lmu):
    r12 = r1 * r1; r22 = r2 * r2
    l1mr1 = np.log(1.0 - r1)
    lr2 = np.log(r2); lr2m1 = np.log(r2 - 1.0)
    l = np.log((r2 - 1.0) / (1.0 - r1))

    if np.abs(r1) < SQRT_EPS:
        Lr1 = _log1mr1_over_r1_series(r1)
    else:
        Lr1 = l1mr1 / r1

    l0 = r2 * (26.0 - 5.0 * r1 - 5.0 * r2 - (-12.0 + 11.0 * r1 + r2) * pi2 / 6.0)
    l1 = - (4.0 * r1 - 3.0 * r12 + (-6.0 * r1 + 2.0 * r12) * r2 + (1.0 + 2.0 * r1) * r22) * Lr1
    l2 = 2.0 * (4.0 - 3.0 * r1 + (-3.0 + r1) * r2 + r22) * lr2m1
    l3 = r2 * (-14.0 + r1 + r2) * lmu
    dl1 = r2 * ((-4.0 + r1 + 3.0 * r2) * l1mr1 * l1mr1 + (-4.0 + 5.0 * r1 - r2) * lr2m1 * lr2m1 + (-4.0 + 3.0 * r1 + r2) * l1mr1 * lr2
            - 2.0 * (-4.0 + 3.0 * r1 + r2) * (l1mr1 + lr2) * lr2m1 + 2.0 * (r1 - r2) * l * lmu)
    dl2 = r2 * ((-4.0 + r1 + 3.0 * r2) * re_li2(r1) + (12.0 - 7.0 * r1 - 5.0 * r2) * re_li2(1.0 - r2))

    return 3.0 * (l0 + l1 + l2 + l3 + dl1 + dl2)


###############################################################################
# LO auxiliary functions of the three-particle twist-3 and twist-4 LCDAs
###############################################################################

#--twist 3, f+ sum rule

def I3(u, omega3pi):
    u3 = u * u * u; ubar2 = (1.0 - u) * (1.0 - u)
    return 5.0 / 2.0 * u3 * ubar2 * (12.0 + (7.0 * u - 4) * omega3pi)


def I3_d1(u, omega3pi):
    u2 = u * u; ubar = 1.0 - u
    return 15.0 * u2 * ubar * (6.0 - 10.0 * u - (2.0 - 8.0 * u + 7.0 * u2) * omega3pi)


def I3bar(u, omega3pi):
    u3 = u * u * u; ubar2 = (1.0 - u) * (1.0 - u)
    return 5.0 / 2.0 * u3 * ubar2 * (24.0 * u + 6.0 * u * omega3pi - 3.0 * (omega3pi + 4.0))


def I3bar_d1(u, omega3pi):
    u2 = u * u; u3 = u2 * u
    return 15.0 / 2.0 * u2 * (12.0 * u3 - 25.0 * u2 + 16.0 * u - 3.0) * (omega3pi + 4.0)


#--twist 3, f0 (tilde) sum rule

def I3til(u, omega3pi):
    u2 = u * u; ubar2 = (1.0 - u) * (1.0 - u)
    return 5.0 / 2.0 * u2 * ubar2 * (28.0 * u2 * omega3pi - 2.0 * u * (17.0 * omega3pi + 12.0) + 9.0 * (omega3pi + 4.0))


def I3til_d1(u, omega3pi):
    u2 = u * u; u3 = u2 * u
    return 15.0 * u * (u - 1.0) * (28.0 * u3 * omega3pi - u2 * (47.0 * omega3pi + 20.0) + u * (23.0 * omega3pi + 36.0) - 3.0 * (omega3pi + 4.0))


#--twist 4

def I4(u, mpi2, a2pi, deltapipi):
    u2 = u * u; u3 = u2 * u
    ubar = 1.0 - u
    return -1.0 / 24.0 * u * ubar * (
            mpi2 * (54.0 * u3 - 81.0 * u2 + 27.0 * ubar + 27.0 * a2pi * (16.0 * u3 - 29.0 * u2 + 13.0 * u - 1.0))
            + 16.0 * u * (20.0 * u - 30.0) * deltapipi
        )


def I4_d1(u, mpi2, a2pi, deltapipi):
    u2 = u * u; u3 = u2 * u; u4 = u2 * u2
    return 1.0 / 24 * (
            27.0 * mpi2 * (
                (10.0 * u4 - 20.0 * u3 + 6.0 * u2 + 4.0 * u - 1.0)
                + a2pi * (80.0 * u4 - 180.0 * u3 + 126.0 * u2 - 28.0 * u + 1)
            )
            + 160.0 * u * (6.0 - 15.0 * u + 8.0 * u2) * deltapipi
        )


def I4bar(u, mpi2, a2pi, deltapipi, omega4pi):
    u2 = u * u; u3 = u2 * u
    ubar = 1.0 - u
    return 1.0 / 48.0 * u * ubar * (
            mpi2 * (
                -(54.0 * u3 - 81.0 * u2 - 27.0 * u + 27.0)
                + 27.0 * a2pi * (32.0 * u3 - 43.0 * u2 + 11.0 * u + 1.0)
            )
            - 20.0 * u * (
                (12.0 - 20.0 * u)
                + (378.0 * u2 - 567.0 * u + 189.0) * omega4pi
            ) * deltapipi
        )


def I4barI(u, mpi2, a2pi, deltapipi, omega4pi):
    u2 = u * u
    ubar = 1.0 - u; ubar2 = ubar * ubar
    return 1.0 / 96.0 * u2 * ubar2 * (
            mpi2 * (
                9.0 * (3.0 + 2.0 * ubar * u)
                + 9.0 * a2pi * (32.0 * u2 - 26.0 * u - 3.0)
            )
            + 40.0 * u * (4.0 + 63.0 * ubar * omega4pi) * deltapipi
        )


def I4bar_d1(u, mpi2, a2pi, deltapipi, omega4pi):
    u2 = u * u; u3 = u2 * u; u4 = u2 * u2
    return 1.0 / 48.0 * (
            27.0 * mpi2 * (
                (10.0 * u4 - 20.0 * u3 + 6.0 * u2 + 4.0 * u - 1.0)
                - a2pi * (160.0 * u4 - 300.0 * u3 + 162.0 * u2 - 20.0 * u - 1.0)
            )
            + 40.0 * u * (
                (-40.0 * u2 + 48.0 * u - 12.0)
                + 189.0 * (5.0 * u3 - 10.0 * u2 + 6.0 * u - 1.0) * omega4pi
            ) * deltapipi
        )


def I4T(u, mpi2, a2pi, deltapipi, omega4pi):
    u2 = u * u; u3 = u2 * u; u4 = u2 * u2; u5 = u4 * u
    ubar = 1.0 - u; ubar2 = ubar * ubar
    at = np.arctanh(1.0 - 2.0 * u)
    return 1.0 / 40.0 * (
            mpi2 * (
                + (90.0 * u5 - 225.0 * u4 + 90.0 * u3 + 90.0 * u2 - 45.0 * u)
                + 9.0 * a2pi * (70.0 * u5 - 227.0 * u4 + 254.0 * u3 - 94.0 * u2 - 3.0 * u
                    + 16.0 * (6.0 * u2 - 15.0 * u + 10.0) * u3 * at - 8.0 * np.log(ubar))
            )
            + 10.0 * (
                40.0 * u2 * ubar2
                - 21.0 * (-40.0 * u5 + 87.0 * u4 - 54.0 * u3 + 9.0 * u2 - 2.0 * u
                    + 4.0 * (6.0 * u2 - 15.0 * u + 10.0) * u3 * at - 2.0 * np.log(ubar)) * omega4pi
            ) * deltapipi
        )


def I4T_d1(u, mpi2, a2pi, deltapipi, omega4pi):
    u2 = u * u; u3 = u2 * u; u4 = u3 * u
    ubar = 1.0 - u; ubar2 = ubar * ubar
    at = np.arctanh(1.0 - 2.0 * u)
    return 1.0 / 8.0 * (
            mpi2 * (
                + (90.0 * u4 - 180.0 * u3 + 54.0 * u2 + 36.0 * u - 9.0)
                + 9.0 * a2pi * (70.0 * u4 - 172.0 * u3 + 138.0 * u2 - 36.0 * u + 1.0 + 96.0 * ubar2 * u2 * at)
            )
            + 40.0 * u * (
                4.0 * (1.0 - 3.0 * u + 2.0 * u2)
                + 21.0 * ubar * (-1.0 + 8.0 * u - 10.0 * u2 - 6.0 * ubar * u * at) * omega4pi
            ) * deltapipi
        )
