import numpy as np

from charmff.qcdlib import config_loader as cfg

class ALPHAS:
    """
    Class to calculate the running of the strong coupling, alpha_S.
    The derivative of alpha_S with respect to a scale, Q2, are the known beta functions, which depend on the strong coupling.
    The alpha_S is solved for using Runge-Kutta integration, starting from alpha_S(MZ) and
    matching at the bottom and charm thresholds.

    The boundary values are read from the parameter store at every call.

    inputs: parameters = store holding QCD::alpha_s(MZ), mass::Z, mass::b(MSbar), mass::c(MSbar); type = Parameters
            user       = bookkeeping of used parameter names;                                     type = ParameterUser
    """

    def __init__(self,parameters,user=None):

        self.beta=np.zeros((7,3))
        for Nf in range(3,7):
            self.beta[Nf,0]=11.0-2.0/3.0*Nf
            self.beta[Nf,1]=102.-38.0/3.0*Nf
            self.beta[Nf,2]=2857.0/2.0-5033.0/18.0*Nf+325.0/54.0*Nf**2

        names=['QCD::alpha_s(MZ)','mass::Z','mass::b(MSbar)','mass::c(MSbar)']
        if user is not None:
            handles=[user.use(parameters,name) for name in names]
        else:
            handles=[parameters[name] for name in names]
        self.alphaSMZ,self.mZ,self.mb,self.mc=handles

        #--memo keyed on Q2 and the boundary values, so it never returns stale results
        self.storage={}

    def _inputs(self):
        return (self.alphaSMZ(),self.mZ()**2,self.mb()**2,self.mc()**2)

    def _boundaries(self,inputs):
        if inputs not in self.storage:
            alphaSMZ,mZ2,mb2,mc2=inputs
            aZ=alphaSMZ/(4*np.pi)
            ab=self.evolve_a(mZ2,aZ,mb2,5)
            ac=self.evolve_a(mb2,ab,mc2,4)
            self.storage[inputs]=(aZ,ab,ac)
        return self.storage[inputs]

    def get_Nf(self,Q2):
        """
        Returns the number of active flavors used for the calculation; input is a float Q2
        """
        _,_,mb2,mc2=self._inputs()
        Nf=3
        if Q2>=mc2: Nf+=1
        if Q2>=mb2: Nf+=1
        return Nf

    def beta_func(self,a,Nf):
        """
        Gets proper beta function for an input, Nf, and scaled strong coupling a (a=alphaS/4pi).
        """
        betaf = -self.beta[Nf,0]
        if cfg.alphaS_order>=1: betaf+=-a*self.beta[Nf,1]
        if cfg.alphaS_order>=2: betaf+=-a**2*self.beta[Nf,2]
        return betaf*a**2

    def evolve_a(self,Q20,a,Q2,Nf):
        # Runge-Kutta implemented in pegasus
        LR = np.log(Q2/Q20)/20.0
        for k in range(20):
            XK0 = LR * self.beta_func(a,Nf)
            XK1 = LR * self.beta_func(a + 0.5 * XK0,Nf)
            XK2 = LR * self.beta_func(a + 0.5 * XK1,Nf)
            XK3 = LR * self.beta_func(a + XK2,Nf)
            a+= (XK0 + 2.* XK1 + 2.* XK2 + XK3) * 0.166666666666666
        return a

    def get_a(self,Q2):
        """
        This calls the evolution for particular Q2, which also determines the number of flavors.
        """
        inputs=self._inputs()
        key=(Q2,)+inputs
        if key not in self.storage:
            _,mZ2,mb2,mc2=inputs
            aZ,ab,ac=self._boundaries(inputs)
            if mb2<=Q2:
                Q20,a0,Nf=mZ2,aZ,5
            elif mc2<=Q2 and Q2<mb2:
                Q20,a0,Nf=mb2,ab,4
            else:
                Q20,a0,Nf=mc2,ac,3
            self.storage[key]=self.evolve_a(Q20,a0,Q2,Nf)
        return self.storage[key]

    def get_alphaS(self,Q2):
        """
        This is the main output of the class.

        input: float Q2
        return: strong coupling constant, alphaS
        """
        return self.get_a(Q2)*4*np.pi


if __name__=='__main__':

    from charmff.qcdlib.parameters import Parameters

    p=Parameters.defaults()
    aS=ALPHAS(p)

    mc2=p['mass::c(MSbar)']()**2
    mb2=p['mass::b(MSbar)']()**2
    mZ2=p['mass::Z']()**2

    print('========================')
    print('test alphaS running')
    print('========================')
    print('Q2=1           alphaS=%0.5f'%aS.get_alphaS(1.0))
    print('Q2=mc2         alphaS=%0.5f'%aS.get_alphaS(mc2))
    print('Q2=(mc2+mb2)/2 alphaS=%0.5f'%aS.get_alphaS(0.5*(mc2+mb2)))
    print('Q2=mb2         alphaS=%0.5f'%aS.get_alphaS(mb2))
    print('Q2=mZ2         alphaS=%0.5f'%aS.get_alphaS(mZ2))
