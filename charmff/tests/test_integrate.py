"""
Tests of the QAGS wrapper: convergence, error wrapping and strict mode.
"""

import numpy as np
import pytest

from charmff.qcdlib.integrate import QAGS, IntegrationError


def test_polynomial():
    qags = QAGS(epsrel=1e-10)
    assert qags.integrate(lambda x: 3.0 * x * x, 0.0, 2.0) == pytest.approx(8.0, rel=1e-10)
    assert QAGS().integrate(np.exp, 0.0, 1.0) == pytest.approx(np.e - 1.0, rel=1e-3)
    print("✅ QAGS integrates smooth functions")


def test_integrand_failure_is_wrapped():
    qags = QAGS()

    def f(x):
        return 1.0 / 0.0

    with pytest.raises(IntegrationError) as excinfo:
        qags.integrate(f, 0.0, 1.0, q2=0.5, channel="F_lo_tw2")

    e = excinfo.value
    assert e.a == 0.0 and e.b == 1.0
    assert e.context == {"q2": 0.5, "channel": "F_lo_tw2"}
    assert "F_lo_tw2" in str(e)
    assert isinstance(e.__cause__, ZeroDivisionError)
    print(f"✅ Got expected IntegrationError: {e}")


def test_strict_non_convergence():
    f = lambda x: np.sin(50.0 * x)

    with pytest.raises(IntegrationError):
        QAGS(epsrel=1e-12, limit=1, strict=True).integrate(f, 0.0, 10.0, channel="oscillating")

    #--non-strict mode returns the best estimate
    value = QAGS(epsrel=1e-12, limit=1, strict=False).integrate(f, 0.0, 10.0, channel="oscillating")
    assert np.isfinite(value)


def test_integration_error_message():
    e = IntegrationError("quadrature did not converge", 1.0, 2.0, {"q2": 0.0})
    assert str(e) == "quadrature did not converge [bounds = (1.0, 2.0); q2 = 0.0]"
    assert str(IntegrationError("failed")) == "failed [bounds = (None, None)]"
