from __future__ import division, print_function, absolute_import
from collections import namedtuple
from math import sqrt
import warnings
import numpy as np

from NGR_codes.Correlations.ComponentProperties import R_UNIVERSAL, DefaultPropertyTable
from NGR_codes.NGR_Tools.Exceptions import NonConvergentRoot

# Newton-Raphson settings for the compressibility factor
Z_GUESS = 1.0           # vapor-like starting point
MAXITER = 20
TOL_Z = 1e-7
TOL_DF = 1e-9

# Imaginary parts below this are treated as real roots
TOL_IMAG = 1e-10

RootResult = namedtuple('RootResult', ['Z', 'converged', 'n_iter', 'n_roots'])


# ------------------------------------------------------------------
def CubicCoefficients(A, B):
    """
    Coefficients [1, c2, c1, c0] of the Peng-Robinson cubic in Z
    """
    return [1.0,
            -(1.0 - B),
            A - 3 * B**2 - 2 * B,
            -(A * B - B**2 - B**3)]


def CubicResidual(Z, A, B):
    """f(Z) of the Peng-Robinson cubic"""
    return Z**3 - (1 - B) * Z**2 + (A - 3 * B**2 - 2 * B) * Z - (A * B - B**2 - B**3)


def CubicDerivative(Z, A, B):
    return 3 * Z**2 - 2 * (1 - B) * Z + (A - 3 * B**2 - 2 * B)


def SolveZ_Newton(A, B, Z0=Z_GUESS, maxiter=MAXITER, tol=TOL_Z, df_min=TOL_DF, strict=False):
    """
    Newton-Raphson on the cubic, started from Z0 = 1 so that it runs down onto the
    vapor-like root. The iteration is capped at maxiter steps; it stops early when
    the derivative vanishes (|f'| < df_min) or when successive iterates agree to tol.

    Returns a RootResult. Without convergence the last estimate is returned with
    converged = False and a warning (or NonConvergentRoot if strict).
    """
    Z = Z0
    for i in range(maxiter):
        f = CubicResidual(Z, A, B)
        df = CubicDerivative(Z, A, B)
        if abs(df) < df_min:
            break
        Z_new = Z - f / df
        if abs(Z_new - Z) < tol:
            return RootResult(Z_new, True, i + 1, None)
        Z = Z_new
    else:
        i = maxiter

    msg = 'Compressibility factor not converged after %d iterations (A=%g, B=%g, Z=%g)' % (i, A, B, Z)
    if strict:
        raise NonConvergentRoot(msg)
    warnings.warn(msg)
    return RootResult(Z, False, i, None)


def CubicRoots(A, B):
    """
    All real roots of the cubic, ascending
    """
    roots = np.roots(CubicCoefficients(A, B))
    real = roots[np.abs(roots.imag) < TOL_IMAG].real
    return np.sort(real)


def SolveZ_Cubic(A, B, phase='vapor'):
    """
    Enumerate the real roots and select by rule: roots must exceed B (positive
    molar volume), the largest is the vapor root and the smallest the liquid one.
    n_roots reports how many admissible roots exist; more than one means the state
    lies inside the two-phase envelope of the equation of state.
    """
    roots = CubicRoots(A, B)
    roots = roots[roots > B]
    if len(roots) == 0:
        raise NonConvergentRoot('No real root above B for A=%g, B=%g' % (A, B))
    if phase == 'vapor':
        Z = roots[-1]
    elif phase == 'liquid':
        Z = roots[0]
    else:
        raise ValueError("phase must be either 'vapor' or 'liquid'")
    return RootResult(float(Z), True, 0, len(roots))


def SolveZ(A, B, method='Cubic', strict=False, **kwargs):
    """
    Compressibility factor of the Peng-Robinson cubic

    method 'Newton' follows the iterative solver started at Z = 1; method 'Cubic'
    enumerates the roots and takes the vapor (largest) root
    """
    if method == 'Newton':
        return SolveZ_Newton(A, B, strict=strict, **kwargs)
    elif method == 'Cubic':
        return SolveZ_Cubic(A, B, **kwargs)
    else:
        raise ValueError("method must be either 'Newton' or 'Cubic'")


# ------------------------------------------------------------------
def PR_PureParameters(rec, T):
    """
    Peng-Robinson a_i [psia-ft^6/lbmol^2] and b_i [ft^3/lbmol] of a species at T [R]
    """
    b_i         = 0.07780 * R_UNIVERSAL * rec.Tc / rec.Pc
    kappa_i     = 0.37464 + 1.54226 * rec.omega - 0.26992 * rec.omega**2
    Tr          = T / rec.Tc
    alpha_i     = (1 + kappa_i * (1 - sqrt(Tr)))**2
    ac_i        = 0.45724 * (R_UNIVERSAL**2 * rec.Tc**2) / rec.Pc
    a_i         = ac_i * alpha_i
    return a_i, b_i


def PR_MixingRules(composition, T, Table=DefaultPropertyTable):
    """
    Mole fraction weighted mixing without binary interaction parameters

        b_mix = sum(y_i b_i),  a_mix = (sum(y_i sqrt(a_i)))^2,  MW_mix = sum(y_i MW_i)

    All species are looked up first so an unknown name fails before any arithmetic
    """
    records     = [(Table.lookup(name), yi) for name, yi in composition.items()]

    MW_mix      = 0.0
    b_mix       = 0.0
    a_sqrt_sum  = 0.0
    for rec, yi in records:
        a_i, b_i = PR_PureParameters(rec, T)
        MW_mix      += yi * rec.MW
        b_mix       += yi * b_i
        a_sqrt_sum  += yi * sqrt(a_i)
    return a_sqrt_sum**2, b_mix, MW_mix


def PR_Dimensionless(a_mix, b_mix, T, P):
    """A and B of the cubic at T [R] and P [psia]"""
    A = a_mix * P / (R_UNIVERSAL * T)**2
    B = b_mix * P / (R_UNIVERSAL * T)
    return A, B
