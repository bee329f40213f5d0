"""
Adaptive one-dimensional quadrature for the sum-rule and decay-rate integrals.

QAGS wraps scipy.integrate.quad (QUADPACK QAGS on finite intervals) with a
relative-error tolerance and a subdivision limit read from config.yaml. When
QUADPACK reports that the tolerance was not reached, a warning is logged and the
best estimate is returned; with strict = True an IntegrationError is raised
instead. Arithmetic failures inside an integrand are always wrapped into an
IntegrationError carrying the integration bounds and the physical point (q2,
channel, ...) that was being evaluated.

Usage:
    from charmff.qcdlib.integrate import QAGS
    qags = QAGS(epsrel=1e-3)
    value = qags.integrate(f, 0.0, 1.0, q2=0.0, channel='F_lo_tw2')
"""

import logging

from scipy.integrate import quad

from charmff.qcdlib import config_loader as cfg

logger = logging.getLogger(__name__)


class IntegrationError(RuntimeError):
    """
    Raised when a quadrature fails or, in strict mode, does not converge.

    Attributes:
        a, b: integration bounds
        context: dict identifying the physical point (q2, channel, ...)
    """

    def __init__(self, message, a=None, b=None, context=None):
        self.a = a
        self.b = b
        self.context = dict(context or {})
        details = ", ".join(f"{k} = {v}" for k, v in self.context.items())
        text = f"{message} [bounds = ({a}, {b})"
        if details:
            text += f"; {details}"
        text += "]"
        super().__init__(text)


class QAGS:
    """
    Configuration and driver of the adaptive quadrature.

    inputs: epsrel = target relative error;        type = float
            epsabs = target absolute error;        type = float
            limit  = maximal number of subintervals; type = int
            strict = raise on non-convergence;     type = bool
    """

    def __init__(self, epsrel=None, epsabs=0.0, limit=None, strict=None):
        settings = cfg.integration
        self.epsrel = settings['epsrel'] if epsrel is None else epsrel
        self.epsabs = epsabs
        self.limit = settings['limit'] if limit is None else limit
        self.strict = settings['strict'] if strict is None else strict

    def integrate(self, f, a, b, **context):
        """
        Integrate f over [a, b].

        The keyword arguments only label the call; they end up in log messages
        and in the IntegrationError context.
        """
        try:
            res = quad(f, a, b, epsabs=self.epsabs, epsrel=self.epsrel, limit=self.limit, full_output=1)
        except (ZeroDivisionError, ValueError, FloatingPointError, OverflowError) as e:
            raise IntegrationError(f"integrand could not be evaluated: {e}", a, b, context) from e

        value, abserr = res[0], res[1]

        #--quad appends a message only when QUADPACK signals a problem
        if len(res) > 3:
            message = res[3]
            if self.strict:
                raise IntegrationError(f"quadrature did not converge: {message}", a, b, context)
            logger.warning("quadrature did not converge (estimate = %g, abserr = %g) on (%g, %g) %s: %s",
                           value, abserr, a, b, context, message.splitlines()[0])

        return value
