from __future__ import division, print_function, absolute_import
from CoolProp.CoolProp import PropsSI

from NGR_codes.NGR_Tools.convert_units import R2K, Jkg2Btulbm

# Below this compressibility factor a stream is not treated as a single gas phase
Z_GAS_MIN = 0.01

# Watson exponent
WATSON_N = 0.38


# ------------------------------------------------------------------
def Phase_Z(Z, Z_min=Z_GAS_MIN):
    """
    Phase label and vapor fraction from the compressibility factor alone.
    This is a display heuristic, there is no flash behind it.
    """
    if Z > Z_min:
        return 'Gas', 1.0
    else:
        return 'Liquid/Two-Phase', None


def PhaseLabel(Z, Z_min=Z_GAS_MIN):
    Phase, x = Phase_Z(Z, Z_min)
    if x is None:
        return Phase
    return '%.3f (%s)' % (x, Phase)


def LatentHeat_Watson(T, rec, n=WATSON_N):
    """
    Latent heat of vaporization [Btu/lbmol] at T [R] from the Watson equation

        dH_vap = Hvap_ref * ((1 - Tr) / (1 - Tr_ref))^n

    rec must carry the reference latent heat Hvap_ref at T_ref_Hvap
    """
    if rec.Hvap_ref is None or rec.T_ref_Hvap is None:
        raise ValueError(rec.name + ' has no reference latent heat')
    if T >= rec.Tc:
        raise ValueError('T = %g R is not below the critical temperature of %s (%g R)' % (T, rec.name, rec.Tc))
    Tr_in   = T / rec.Tc
    Tr_ref  = rec.T_ref_Hvap / rec.Tc
    return rec.Hvap_ref * pow((1 - Tr_in) / (1 - Tr_ref), n)


def LatentHeat_CoolProp(T, rec):
    """
    Latent heat of vaporization [Btu/lbm] at T [R] from the CoolProp saturation
    curve of the species, used as a cross-check of the Watson correlation
    """
    T_K     = R2K(T)
    h_l     = PropsSI('H', 'T', T_K, 'Q', 0, rec.name)     # [J/kg]
    h_v     = PropsSI('H', 'T', T_K, 'Q', 1, rec.name)     # [J/kg]
    return Jkg2Btulbm(h_v - h_l)


def LatentHeatMass(T, rec, model='Watson'):
    """
    Latent heat on a mass basis [Btu/lbm]
    """
    if model == 'Watson':
        return LatentHeat_Watson(T, rec) / rec.MW
    elif model == 'CoolProp':
        return LatentHeat_CoolProp(T, rec)
    else:
        raise ValueError("model must be either 'Watson' or 'CoolProp'")
