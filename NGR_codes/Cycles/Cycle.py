from __future__                                         import division, print_function, absolute_import

from NGR_codes.Components.GasCooler                     import GasCoolerClass          # Natural gas cooler
from NGR_codes.Components.Evaporator                    import EvaporatorClass         # Refrigerant evaporator
from NGR_codes.Correlations.ComponentProperties         import DefaultPropertyTable
from NGR_codes.NGR_Tools.Exceptions                     import DutyNotYetComputed


# ----------------------------------------------------------------------
class ChillerCycleClass():
    def __init__(self, Table=DefaultPropertyTable):
        """
        Load up the necessary sub-structures to be filled with
        the code that follows

        Q_duty holds the latest gas-side heat duty. It is None until the gas cooler has
        been calculated and is only written by CalculateGasCooler.
        """
        self.Table                      = Table
        self.GasCooler                  = GasCoolerClass()
        self.Evaporator                 = EvaporatorClass()
        self.Q_duty                     = None
        self.Verbosity                  = 0

    def Update(self, **kwargs):
        """
        Update cycle-level settings and push the shared ones (Table, Verbosity) to the
        components
        """
        self.__dict__.update(kwargs)
        self.GasCooler.Update(Table=self.Table, Verbosity=self.Verbosity)
        self.Evaporator.Update(Table=self.Table, Verbosity=self.Verbosity)

    def OutputList(self):
        """
            Return a list of parameters for this component for further output

            It is a list of tuples, and each tuple is formed of items:
                [0] Description of value
                [1] Units of value
                [2] The value itself
        """
        Output_List                     = []
        # append optional parameters, if applicable
        if hasattr(self, 'TestName'):
            Output_List.append(('Name',                     'N/A',  self.TestName))
        if hasattr(self, 'TestDescription'):
            Output_List.append(('Description',              'N/A',  self.TestDescription))
        Output_List.append(('Refrigerant',                  '-',        self.Table.RefrigerantName))
        Output_List.append(('Natural gas heat duty',        'Btu/hr',   self.Q_duty))
        if hasattr(self.Evaporator, 'm_dot_r'):
            Output_List.append(('Refrigerant flow rate',    'lb/hr',    self.Evaporator.m_dot_r))
        return Output_List

    def CalculateGasCooler(self, **kwargs):
        """
        Run the gas cooler with the given parameters (see GasCoolerClass) and keep its
        duty for the refrigerant side
        """
        self.GasCooler.Update(**kwargs)
        if not hasattr(self.GasCooler, 'Table'):
            self.GasCooler.Update(Table=self.Table)
        self.GasCooler.Calculate()
        self.Q_duty                     = self.GasCooler.Q
        if self.Verbosity > 1:
            print('Cycle :: heat duty %.6e Btu/hr' % self.Q_duty)
        return self.Q_duty

    def CalculateEvaporator(self, T_in_r, **kwargs):
        """
        Size the refrigerant flow for the latest heat duty
        """
        if self.Q_duty is None:
            raise DutyNotYetComputed('Please calculate the natural gas heat duty first')
        self.Evaporator.Update(Q_duty=self.Q_duty, T_in_r=T_in_r, **kwargs)
        if not hasattr(self.Evaporator, 'Table'):
            self.Evaporator.Update(Table=self.Table)
        self.Evaporator.Calculate()
        if self.Verbosity > 1:
            print('Cycle :: refrigerant flow %.4f lb/hr' % self.Evaporator.m_dot_r)
        return self.Evaporator.m_dot_r

    def Calculate(self, T_in_r, **kwargs):
        """
        Gas cooler followed by the evaporator; kwargs go to the gas cooler
        """
        self.CalculateGasCooler(**kwargs)
        return self.CalculateEvaporator(T_in_r)
