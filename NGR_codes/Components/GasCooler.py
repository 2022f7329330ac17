from __future__                                         import division, print_function, absolute_import

from NGR_codes.Correlations.ComponentProperties         import DefaultPropertyTable, ValidateComposition
from NGR_codes.Correlations.Enthalpy_Correlations       import MixtureEnthalpy
from NGR_codes.Correlations.PhaseState_Correlations     import PhaseLabel
from NGR_codes.NGR_Tools.NGR_Tools                      import ValidateFields
from scipy.optimize                                     import brentq


# ----------------------------------------------------------------------------
def HeatDutyStates(m_dot, T_in, T_out, P, composition, **kwargs):
    """
    Inlet and outlet states of a gas stream cooled (or heated) at constant pressure,
    and the heat duty between them

    The molar flow is based on the inlet molar mass. kwargs are passed to
    MixtureEnthalpy (Table, IdealModel, RootMethod, strict).

    Returns (Q, inlet, outlet) with Q in Btu/hr for m_dot in lb/hr; Q < 0 when
    the stream is cooled
    """
    inlet                       = MixtureEnthalpy(T_in, P, composition, **kwargs)
    outlet                      = MixtureEnthalpy(T_out, P, composition, **kwargs)

    deltaH                      = outlet.H_total - inlet.H_total        # [Btu/lbmol]
    n_dot                       = m_dot / inlet.MW_mix                  # [lbmol/hr]
    return deltaH * n_dot, inlet, outlet


def HeatDuty(m_dot, T_in, T_out, P, composition, **kwargs):
    """Heat duty [Btu/hr] of the gas stream between T_in and T_out [R] at P [psia]"""
    Q, inlet, outlet            = HeatDutyStates(m_dot, T_in, T_out, P, composition, **kwargs)
    return Q


def OutletTemperature(Q_target, m_dot, T_in, P, composition, T_min, **kwargs):
    """
    Outlet temperature [R] at which the gas stream gives up the duty Q_target [Btu/hr]
    (negative for cooling), searched between T_min and T_in
    """
    def OBJECTIVE(T_out):
        return HeatDuty(m_dot, T_in, T_out, P, composition, **kwargs) - Q_target

    return brentq(OBJECTIVE, T_min, T_in)


class GasCoolerClass():
    """
    Natural gas cooler: heat removed from a gas stream between two temperatures at a
    fixed pressure

    Required Parameters:

    ===========    ==========  ========================================================================
    Variable       Units       Description
    ===========    ==========  ========================================================================
    m_dot_g        lb/hr       Mass flow rate of the gas
    T_in_g         R           Gas inlet temperature
    T_out_g        R           Gas outlet temperature
    p_g            psia        Gas pressure (absolute)
    Composition    N/A         dict of mole fractions {species name: y_i}
    ===========    ==========  ========================================================================

    Optional Parameters: Table (property table), IdealModel, RootMethod ('Cubic' or
    'Newton'), strict, Verbosity
    """
    def __init__(self, **kwargs):
        # Load up the parameters passed in
        # using the dictionary
        self.__dict__.update(kwargs)

    def Update(self, **kwargs):
        # Update the parameters passed in
        # using the dictionary
        self.__dict__.update(kwargs)

    def OutputList(self):
        """
            Return a list of parameters for this component for further output

            It is a list of tuples, and each tuple is formed of items:
                [0] Description of value
                [1] Units of value
                [2] The value itself
        """
        return [
            ('Mass flow rate',                  'lb/hr',        self.m_dot_g),
            ('Inlet Temp',                      'R',            self.T_in_g),
            ('Outlet Temp',                     'R',            self.T_out_g),
            ('Pressure',                        'psia',         self.p_g),
            ('Mixture molar mass',              'lb/lbmol',     self.MW_mix),
            ('Molar flow rate',                 'lbmol/hr',     self.n_dot_g),
            ('Inlet Enthalpy',                  'Btu/lbmol',    self.h_in_g),
            ('Outlet Enthalpy',                 'Btu/lbmol',    self.h_out_g),
            ('Inlet Compressibility',           '-',            self.Z_in_g),
            ('Outlet Compressibility',          '-',            self.Z_out_g),
            ('Inlet Phase',                     '-',            self.Phase_in_g),
            ('Outlet Phase',                    '-',            self.Phase_out_g),
            ('Q Total',                         'Btu/hr',       self.Q),
        ]

    def Initialize(self):
        reqFields   = [
            ('m_dot_g',         float,      0,          1e12),
            ('T_in_g',          float,      1,          5000),
            ('T_out_g',         float,      1,          5000),
            ('p_g',             float,      1e-6,       1e6),
            ('Composition',     dict,       None,       None)]

        optFields   = ['Verbosity', 'Table', 'IdealModel', 'RootMethod', 'strict', 'inlet', 'outlet',
                       'Q', 'MW_mix', 'n_dot_g', 'h_in_g', 'h_out_g', 'Z_in_g', 'Z_out_g', 'Phase_in_g',
                       'Phase_out_g', 'DH_g']
        ValidateFields(self.__dict__, reqFields, optFields)

        # Defaults for the optional parameters
        if not hasattr(self, 'Table'):
            self.Table                          = DefaultPropertyTable
        if not hasattr(self, 'IdealModel'):
            self.IdealModel                     = None
        if not hasattr(self, 'RootMethod'):
            self.RootMethod                     = 'Cubic'
        if not hasattr(self, 'strict'):
            self.strict                         = False
        if not hasattr(self, 'Verbosity'):
            self.Verbosity                      = 0

        # Checked before any enthalpy is evaluated
        self.Composition                        = ValidateComposition(self.Composition, self.Table)

    def Calculate(self):
        # Initialize
        self.Initialize()

        self.Q, self.inlet, self.outlet         = HeatDutyStates(self.m_dot_g, self.T_in_g, self.T_out_g, self.p_g,
                                                                 self.Composition, Table=self.Table,
                                                                 IdealModel=self.IdealModel,
                                                                 RootMethod=self.RootMethod, strict=self.strict)
        self.MW_mix                             = self.inlet.MW_mix         # [lb/lbmol]
        self.n_dot_g                            = self.m_dot_g / self.MW_mix    # [lbmol/hr]
        self.h_in_g                             = self.inlet.H_total        # [Btu/lbmol]
        self.h_out_g                            = self.outlet.H_total       # [Btu/lbmol]
        self.DH_g                               = self.h_out_g - self.h_in_g
        self.Z_in_g                             = self.inlet.Z
        self.Z_out_g                            = self.outlet.Z
        self.Phase_in_g                         = PhaseLabel(self.Z_in_g)
        self.Phase_out_g                        = PhaseLabel(self.Z_out_g)

        if self.Verbosity > 0:
            print('GasCooler :: Q = %.6e Btu/hr, Z_in = %.5f, Z_out = %.5f' % (self.Q, self.Z_in_g, self.Z_out_g))
        if self.Verbosity > 1:
            print('GasCooler :: h_in = %.4f, h_out = %.4f Btu/lbmol, n_dot = %.4f lbmol/hr'
                  % (self.h_in_g, self.h_out_g, self.n_dot_g))
