from __future__                     import division, print_function, absolute_import

from matplotlib                     import pyplot as plt
import numpy                        as np

from NGR_codes.Correlations.Enthalpy_Correlations       import MixtureEnthalpy
from NGR_codes.Correlations.PhaseState_Correlations     import LatentHeatMass, Z_GAS_MIN
from NGR_codes.Correlations.ComponentProperties         import DefaultPropertyTable


# ----------------------------------------------------------------------------
class PlotsClass():

    def __init__(self,  *args,  **kwds):
        pass

    # H-T and Z-T cooling curves of the gas
    def CoolingCurve(self, Cycle, N=50, **kwargs):

        GC                          = Cycle.GasCooler
        T_lo                        = min(GC.T_in_g, GC.T_out_g)
        T_hi                        = max(GC.T_in_g, GC.T_out_g)
        T                           = np.linspace(T_lo, T_hi, N)
        H                           = np.zeros(N)
        Z                           = np.zeros(N)

        for i in np.arange(N):
            state                   = MixtureEnthalpy(T[i], GC.p_g, GC.Composition, Table=GC.Table,
                                                      IdealModel=GC.IdealModel, RootMethod=GC.RootMethod)
            H[i]                    = state.H_total
            Z[i]                    = state.Z

        fig                         = plt.figure(figsize=(10, 4))
        ax1                         = fig.add_subplot(121)
        ax1.plot(T - 459.67, H, 'b-', lw=2)
        ax1.plot([GC.T_in_g - 459.67, GC.T_out_g - 459.67], [GC.h_in_g, GC.h_out_g], 'ro')
        ax1.set_xlabel(r'$T$ [$^{\circ}$F]')
        ax1.set_ylabel(r'$H$ [Btu/lbmol]')

        ax2                         = fig.add_subplot(122)
        ax2.plot(T - 459.67, Z, 'k-', lw=2)
        ax2.axhline(Z_GAS_MIN, color='grey', ls='--')
        ax2.set_xlabel(r'$T$ [$^{\circ}$F]')
        ax2.set_ylabel(r'$Z$ [-]')
        ax2.set_title('p = %g psia' % GC.p_g)
        fig.tight_layout()

        self.axes                   = (ax1, ax2)
        return fig

    # latent heat of the refrigerant: correlation against the CoolProp saturation curve
    def LatentHeatCurve(self, T_min, T_max, Table=DefaultPropertyTable, N=30, models=('Watson', 'CoolProp')):

        rec                         = Table.refrigerant()
        T                           = np.linspace(T_min, T_max, N)

        fig                         = plt.figure(figsize=(6, 4))
        self.axes                   = fig.add_subplot(111)
        for model in models:
            dh                      = np.array([LatentHeatMass(Ti, rec, model) for Ti in T])
            self.axes.plot(T - 459.67, dh, lw=2, label=model)
        self.axes.set_xlabel(r'$T$ [$^{\circ}$F]')
        self.axes.set_ylabel(r'$\Delta h_{vap}$ [Btu/lbm]')
        self.axes.set_title(rec.name)
        self.axes.legend(loc='best', fancybox=True)
        fig.tight_layout()
        return fig
