from __future__ import division, print_function, absolute_import
from collections import namedtuple
from math import log

from NGR_codes.Correlations.ComponentProperties import R_UNIVERSAL, DefaultPropertyTable
from NGR_codes.Correlations.CubicEOS_Correlations import PR_MixingRules, PR_Dimensionless, SolveZ
from NGR_codes.Correlations.IdealGas_Correlations import IdealEnthalpyLinear

ThermoState = namedtuple('ThermoState', ['H_total', 'Z', 'MW_mix', 'H_ideal', 'H_residual', 'A', 'B',
                                         'converged', 'n_roots'])


# ------------------------------------------------------------------
def ResidualEnthalpy(T, Z, A, B, a_mix, b_mix):
    """
    Simplified Peng-Robinson departure function, in the units of R_UNIVERSAL

        H_res = R*T*(Z-1) - a/(2.8284*b) * ln((Z + 2.414*B)/(Z - 0.414*B))

    2.8284, 2.414 and 0.414 stand for sqrt(8) and sqrt(2) +/- 1 and must stay rounded
    """
    return R_UNIVERSAL * T * (Z - 1) - (a_mix / (2.8284 * b_mix)) * log((Z + 2.414 * B) / (Z - 0.414 * B))


def MixtureEnthalpy(T, P, composition, Table=DefaultPropertyTable, IdealModel=None, RootMethod='Cubic',
                    strict=False):
    """
    Molar enthalpy of a gas mixture from the Peng-Robinson equation of state

    Required Inputs:

    ===========    ==========  ===================================================
    Variable       Units       Description
    ===========    ==========  ===================================================
    T              R           Temperature
    P              psia        Pressure
    composition    -           dict of mole fractions {species name: y_i}
    ===========    ==========  ===================================================

    Optional Inputs: the property table, the ideal-gas enthalpy model (constant Cp by
    default), the root method passed to SolveZ and strict (raise on a non-converged
    Newton solve).

    Returns a ThermoState; H_total = H_ideal + H_residual [Btu/lbmol]. The
    composition is not re-validated here.
    """
    if IdealModel is None:
        IdealModel = IdealEnthalpyLinear()

    # Mixing rules (fails on an unknown species before anything else)
    a_mix, b_mix, MW_mix = PR_MixingRules(composition, T, Table)
    H_ideal = IdealModel.H(T, composition, Table)

    # Solve for Z
    A, B = PR_Dimensionless(a_mix, b_mix, T, P)
    root = SolveZ(A, B, method=RootMethod, strict=strict)
    Z = root.Z

    H_residual = ResidualEnthalpy(T, Z, A, B, a_mix, b_mix)

    return ThermoState(H_total=H_ideal + H_residual,
                       Z=Z,
                       MW_mix=MW_mix,
                       H_ideal=H_ideal,
                       H_residual=H_residual,
                       A=A,
                       B=B,
                       converged=root.converged,
                       n_roots=root.n_roots)
