import numpy as np

from charmff.qcdlib import config_loader as cfg

class MASSES:
    """
    Running of MSbar quark masses.

    With a = alphaS/4pi, the mass runs between two scales of equal Nf as
        m(mu) = m(mu0) * c(a(mu)) / c(a(mu0)),
        c(a)  = a^(gamma0/beta0) * (1 + (gamma1/beta0 - beta1*gamma0/beta0^2) * a),
    where the NLO factor is dropped for mass_order = 0. Threshold crossings are
    continuous at this order.

    inputs: alphaS = strong coupling; type = ALPHAS
    """

    def __init__(self,alphaS):
        self.alphaS=alphaS
        self.gamma=np.zeros((7,2))
        for Nf in range(3,7):
            self.gamma[Nf,0]=4.0
            self.gamma[Nf,1]=202.0/3.0-20.0/9.0*Nf

    def c_func(self,a,Nf):
        beta0=self.alphaS.beta[Nf,0]
        beta1=self.alphaS.beta[Nf,1]
        gamma0,gamma1=self.gamma[Nf]
        c=a**(gamma0/beta0)
        if cfg.mass_order>=1: c*=1.0+(gamma1/beta0-beta1*gamma0/beta0**2)*a
        return c

    def _thresholds(self):
        return self.alphaS.mc()**2,self.alphaS.mb()**2

    def run(self,m0,mu0,mu):
        """
        Evolve the MSbar mass m0 = m(mu0) to the scale mu.

        inputs: m0  = mass at mu0;    type = float
                mu0 = reference scale; type = float
                mu  = target scale;    type = float
        """
        Q20,Q2=mu0*mu0,mu*mu
        if Q20==Q2: return m0

        mc2,mb2=self._thresholds()
        #--split [Q20, Q2] at the flavour thresholds in between
        points=[Q20]
        for t in sorted([mc2,mb2],reverse=(Q2<Q20)):
            if min(Q20,Q2)<t<max(Q20,Q2): points.append(t)
        points.append(Q2)

        m=m0
        for lo,hi in zip(points[:-1],points[1:]):
            Nf=self.alphaS.get_Nf(0.5*(lo+hi))
            a_lo=self.alphaS.get_a(lo)
            a_hi=self.alphaS.get_a(hi)
            m*=self.c_func(a_hi,Nf)/self.c_func(a_lo,Nf)
        return m
