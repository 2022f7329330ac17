from __future__ import division, print_function, absolute_import
import numpy as np

from NGR_codes.Correlations.ComponentProperties import DefaultPropertyTable

# Zero of the ideal-gas enthalpy scale: 0 F in Rankine
T_REF_IDEAL = 459.67


# ----------------------------------------------------------------------------
class IdealEnthalpyLinear():
    """
    Ideal-gas enthalpy with a constant heat capacity per species

        H_ideal = sum(y_i * Cp_A_i) * (T - T_ref)        [Btu/lbmol]
    """
    def __init__(self, T_ref=T_REF_IDEAL):
        self.T_ref = T_ref

    def H(self, T, composition, Table=DefaultPropertyTable):
        H_ideal = 0.0
        for name, yi in composition.items():
            H_ideal += yi * Table.lookup(name).Cp_A * (T - self.T_ref)
        return H_ideal


class IdealEnthalpyPolynomial():
    """
    Ideal-gas enthalpy from Cp = A + B*T + C*T^2 + D*T^3 [Btu/lbmol-R], integrated
    from T_ref to T

    coeffs maps species name to a sequence of up to four coefficients. Species
    without an entry fall back to the constant Cp_A of the property table, so with
    only A given this model reproduces IdealEnthalpyLinear.
    """
    def __init__(self, coeffs=None, T_ref=T_REF_IDEAL):
        self.coeffs = dict(coeffs) if coeffs is not None else {}
        self.T_ref = T_ref

    def Cp_coefficients(self, name, Table=DefaultPropertyTable):
        c = np.zeros(4)
        if name in self.coeffs:
            given = np.asarray(self.coeffs[name], dtype=float)
            c[:len(given)] = given
        else:
            c[0] = Table.lookup(name).Cp_A
        return c

    def H(self, T, composition, Table=DefaultPropertyTable):
        powers = np.arange(1, 5)
        vec2 = T**powers / powers
        vec1 = self.T_ref**powers / powers
        H_ideal = 0.0
        for name, yi in composition.items():
            c = self.Cp_coefficients(name, Table)
            H_ideal += yi * float(np.dot(c, vec2 - vec1))
        return H_ideal
