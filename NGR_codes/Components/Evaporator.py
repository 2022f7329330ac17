from __future__                                         import division, print_function, absolute_import

from NGR_codes.Correlations.ComponentProperties         import DefaultPropertyTable
from NGR_codes.Correlations.PhaseState_Correlations     import LatentHeatMass
from NGR_codes.NGR_Tools.Exceptions                     import DutyNotYetComputed
from NGR_codes.NGR_Tools.NGR_Tools                      import ValidateFields


# ----------------------------------------------------------------------------
def RefrigerantFlow(Q_duty, T_in_r, Table=DefaultPropertyTable, Ref=None, LatentHeatModel='Watson'):
    """
    Refrigerant mass flow [lb/hr] that absorbs |Q_duty| [Btu/hr] by vaporizing at T_in_r [R]

    The refrigerant enters as saturated liquid and leaves as saturated vapor, so only
    the latent heat is used. The sign of the duty is ignored.
    """
    if Q_duty is None:
        raise DutyNotYetComputed('Please calculate the natural gas heat duty first')
    rec                         = Table.refrigerant() if Ref is None else Table.lookup(Ref)
    dh_vap                      = LatentHeatMass(T_in_r, rec, LatentHeatModel)      # [Btu/lbm]
    return abs(Q_duty) / dh_vap


class EvaporatorClass():
    """
    Refrigerant side of the chiller: flooded evaporation of a pure refrigerant

    Required Parameters:

    ===========    ==========  ========================================================================
    Variable       Units       Description
    ===========    ==========  ========================================================================
    Q_duty         Btu/hr      Heat duty to absorb (only the magnitude is used)
    T_in_r         R           Refrigerant inlet (evaporating) temperature
    ===========    ==========  ========================================================================

    Optional Parameters: Table, Ref (species name, the table refrigerant by default),
    LatentHeatModel ('Watson' or 'CoolProp'), Verbosity
    """
    def __init__(self, **kwargs):
        # Load the parameters passed in
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
            ('Refrigerant',                     '-',            self.Ref),
            ('Latent heat model',               '-',            self.LatentHeatModel),
            ('Heat duty absorbed',              'Btu/hr',       abs(self.Q_duty)),
            ('Inlet Temp',                      'R',            self.T_in_r),
            ('Latent heat',                     'Btu/lbm',      self.dh_vap),
            ('Mass flow rate',                  'lb/hr',        self.m_dot_r),
            ('Inlet Quality',                   '-',            self.x_in_r),
            ('Outlet Quality',                  '-',            self.x_out_r),
            ('Inlet Phase',                     '-',            self.Phase_in_r),
            ('Outlet Phase',                    '-',            self.Phase_out_r),
        ]

    def Initialize(self):
        # No duty yet, fail before anything else
        if getattr(self, 'Q_duty', None) is None:
            raise DutyNotYetComputed('Please calculate the natural gas heat duty first')

        reqFields   = [
            ('Q_duty',          float,      -1e15,      1e15),
            ('T_in_r',          float,      1,          5000)]

        optFields   = ['Verbosity', 'Table', 'Ref', 'LatentHeatModel', 'dh_vap', 'm_dot_r', 'x_in_r', 'x_out_r',
                       'Phase_in_r', 'Phase_out_r']
        ValidateFields(self.__dict__, reqFields, optFields)

        if not hasattr(self, 'Table'):
            self.Table                          = DefaultPropertyTable
        if getattr(self, 'Ref', None) is None:
            self.Ref                            = self.Table.RefrigerantName
        if not hasattr(self, 'LatentHeatModel'):
            self.LatentHeatModel                = 'Watson'
        if not hasattr(self, 'Verbosity'):
            self.Verbosity                      = 0

    def Calculate(self):
        # Initialize
        self.Initialize()

        rec                                     = self.Table.lookup(self.Ref)
        self.dh_vap                             = LatentHeatMass(self.T_in_r, rec, self.LatentHeatModel)   # [Btu/lbm]
        self.m_dot_r                            = RefrigerantFlow(self.Q_duty, self.T_in_r, self.Table, self.Ref,
                                                                  self.LatentHeatModel)          # [lb/hr]

        # Saturated liquid in, saturated vapor out
        self.x_in_r                             = 0.0
        self.x_out_r                            = 1.0
        self.Phase_in_r                         = '0.000 (Saturated Liquid)'
        self.Phase_out_r                        = '1.000 (Saturated Vapor)'

        if self.Verbosity > 0:
            print('Evaporator :: %s latent heat %.4f Btu/lbm, m_dot = %.4f lb/hr' % (self.Ref, self.dh_vap,
                                                                                 self.m_dot_r))
