from __future__ import division, print_function, absolute_import
from collections import namedtuple
from types import MappingProxyType

from NGR_codes.NGR_Tools.Exceptions import UnknownSpecies, InvalidComposition

# Gas constant in psia-ft^3/(lbmol-R)
R_UNIVERSAL = 10.73159

# Tolerance on the sum of the mole fractions of a composition
COMPOSITION_TOL = 0.01


# -------------------------------------------------------------------------------
SpeciesRecord = namedtuple('SpeciesRecord', ['name', 'Tc', 'Pc', 'omega', 'MW', 'Cp_A', 'Hvap_ref', 'T_ref_Hvap'])
SpeciesRecord.__new__.__defaults__ = (None, None)
SpeciesRecord.__doc__ = """
    Pure component constants

    ===========    ==============  ================================================
    Variable       Units           Description
    ===========    ==============  ================================================
    name           N/A             Species name used as the composition key
    Tc             R               Critical temperature
    Pc             psia            Critical pressure
    omega          -               Acentric factor
    MW             lb/lbmol        Molar mass
    Cp_A           Btu/lbmol-R     Constant ideal-gas heat capacity
    Hvap_ref       Btu/lbmol       Latent heat at T_ref_Hvap (refrigerant only)
    T_ref_Hvap     R               Reference temperature of Hvap_ref
    ===========    ==============  ================================================
"""


def _check_record(rec):
    assert rec.Tc > 0, rec.name + ': critical temperature must be positive'
    assert rec.Pc > 0, rec.name + ': critical pressure must be positive'
    assert 0 <= rec.omega <= 1, rec.name + ': acentric factor out of range [0,1]'
    assert rec.MW > 0, rec.name + ': molar mass must be positive'


class PropertyTableClass():
    """
    Read-only table of species records, keyed by name

    One species is designated as the refrigerant; it stays in the table (so it can
    be looked up by the evaporator) but is left out of gas_species()
    """
    def __init__(self, records, Refrigerant='Propane'):
        table = {}
        for rec in records:
            _check_record(rec)
            table[rec.name] = rec
        self._table = MappingProxyType(table)
        if Refrigerant is not None and Refrigerant not in self._table:
            raise UnknownSpecies(Refrigerant)
        self._refrigerant = Refrigerant

    def lookup(self, name):
        try:
            return self._table[name]
        except KeyError:
            raise UnknownSpecies(name)

    def names(self):
        return list(self._table.keys())

    def gas_species(self):
        return [name for name in self._table if name != self._refrigerant]

    def refrigerant(self):
        if self._refrigerant is None:
            raise UnknownSpecies(None)
        return self._table[self._refrigerant]

    @property
    def RefrigerantName(self):
        return self._refrigerant

    def __contains__(self, name):
        return name in self._table

    def __iter__(self):
        return iter(self._table)

    def __len__(self):
        return len(self._table)

    def __getitem__(self, name):
        return self.lookup(name)


# Critical constants, acentric factors and molar masses in field units
DefaultPropertyTable = PropertyTableClass([
    SpeciesRecord('Methane',         Tc=343.01,  Pc=667.0,   omega=0.012,   MW=16.04,   Cp_A=8.35),
    SpeciesRecord('Ethane',          Tc=549.58,  Pc=706.7,   omega=0.100,   MW=30.07,   Cp_A=12.64),
    SpeciesRecord('Propane',         Tc=665.70,  Pc=616.0,   omega=0.152,   MW=44.10,   Cp_A=17.56,
                  Hvap_ref=15060.,  T_ref_Hvap=536.67),
    SpeciesRecord('n-Butane',        Tc=765.22,  Pc=550.6,   omega=0.200,   MW=58.12,   Cp_A=23.51),
    SpeciesRecord('iso-Butane',      Tc=734.06,  Pc=527.9,   omega=0.181,   MW=58.12,   Cp_A=23.25),
    SpeciesRecord('n-Pentane',       Tc=845.5,   Pc=488.8,   omega=0.252,   MW=72.15,   Cp_A=28.98),
    SpeciesRecord('n-Hexane',        Tc=913.7,   Pc=438.7,   omega=0.301,   MW=86.18,   Cp_A=34.62),
    SpeciesRecord('Carbon Dioxide',  Tc=547.43,  Pc=1070.0,  omega=0.224,   MW=44.01,   Cp_A=8.85),
    SpeciesRecord('Nitrogen',        Tc=227.16,  Pc=492.4,   omega=0.039,   MW=28.01,   Cp_A=6.95),
], Refrigerant='Propane')


def ValidateComposition(composition, Table=DefaultPropertyTable, tol=COMPOSITION_TOL):
    """
    Check a composition {name: mole fraction} before it is handed to the enthalpy
    evaluator and return a copy without the zero entries

    Raises UnknownSpecies for names not in the table, InvalidComposition for
    fractions outside [0, 1] or a sum further than tol from one
    """
    cleaned = {}
    for name, y in composition.items():
        if name not in Table:
            raise UnknownSpecies(name)
        y = float(y)
        if y < 0 or y > 1:
            raise InvalidComposition('Mole fraction of ' + name + ' (%g) not in the range [0,1]' % y)
        if y > 0:
            cleaned[name] = y
    if not cleaned:
        raise InvalidComposition('Composition is empty')
    total = sum(cleaned.values())
    if abs(total - 1.0) > tol:
        raise InvalidComposition('Total mole fraction must be equal to 1.0 (got %g)' % total)
    return cleaned
