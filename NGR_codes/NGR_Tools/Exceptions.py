from __future__ import division, print_function, absolute_import


# -------------------------------------------------------------------------------
class NGRError(Exception):
    """Base class of the errors raised by the natural gas / refrigerant models"""
    pass


class UnknownSpecies(NGRError, KeyError):
    """A composition or refrigerant references a species missing from the property table"""

    def __init__(self, name):
        self.name = name
        super(UnknownSpecies, self).__init__(name)

    def __str__(self):
        return 'Species ' + repr(self.name) + ' is not in the property table'


class InvalidComposition(NGRError, ValueError):
    """Mole fractions are out of range or do not sum to one"""
    pass


class DutyNotYetComputed(NGRError, RuntimeError):
    """Refrigerant sizing requested before a heat duty is available"""
    pass


class NonConvergentRoot(NGRError, ArithmeticError):
    """The cubic equation of state gave no usable compressibility factor"""
    pass
