import pytest

from NGR_codes.Components.Evaporator import EvaporatorClass, RefrigerantFlow
from NGR_codes.Correlations.ComponentProperties import DefaultPropertyTable
from NGR_codes.Correlations.PhaseState_Correlations import LatentHeat_Watson, LatentHeatMass, PhaseLabel, Phase_Z
from NGR_codes.NGR_Tools.Exceptions import DutyNotYetComputed, UnknownSpecies


def watson_flow(Q, T):
    Tr_in = T / 665.70
    Tr_ref = 536.67 / 665.70
    dH_vap = 15060 * ((1 - Tr_in) / (1 - Tr_ref))**0.38
    return abs(Q) / (dH_vap / 44.10)


def test_watson_flow_at_minus_40F():
    T = -40 + 459.67
    assert RefrigerantFlow(5000000., T) == pytest.approx(watson_flow(5000000., T), rel=1e-12)


def test_flow_ignores_duty_sign():
    T = -40 + 459.67
    assert RefrigerantFlow(-5000000., T) == RefrigerantFlow(5000000., T)


def test_watson_at_reference_temperature():
    propane = DefaultPropertyTable.refrigerant()
    assert LatentHeat_Watson(536.67, propane) == pytest.approx(15060., rel=1e-12)
    # latent heat shrinks towards the critical point
    assert LatentHeat_Watson(600., propane) < LatentHeat_Watson(500., propane)


def test_watson_limits():
    propane = DefaultPropertyTable.refrigerant()
    with pytest.raises(ValueError):
        LatentHeat_Watson(665.70, propane)
    with pytest.raises(ValueError):
        LatentHeat_Watson(400., DefaultPropertyTable.lookup('Methane'))
    with pytest.raises(ValueError):
        LatentHeatMass(400., propane, model='Clapeyron')


def test_coolprop_latent_heat_of_propane():
    # propane boils near -44 F at one atmosphere, h_fg around 183 Btu/lbm
    dh = LatentHeatMass(-40 + 459.67, DefaultPropertyTable.refrigerant(), model='CoolProp')
    assert 150. < dh < 220.
    assert RefrigerantFlow(5000000., -40 + 459.67, LatentHeatModel='CoolProp') == pytest.approx(5000000. / dh)


def test_no_duty_fails():
    with pytest.raises(DutyNotYetComputed):
        RefrigerantFlow(None, 419.67)
    with pytest.raises(DutyNotYetComputed):
        EvaporatorClass(T_in_r=419.67).Calculate()


def test_unknown_refrigerant():
    with pytest.raises(UnknownSpecies):
        RefrigerantFlow(1000., 419.67, Ref='R-22')


def test_component(synthetic_table):
    Evap = EvaporatorClass(Q_duty=-5000000., T_in_r=419.67)
    Evap.Calculate()
    assert Evap.Ref == 'Propane'
    assert Evap.m_dot_r == pytest.approx(watson_flow(5000000., 419.67), rel=1e-12)
    assert Evap.dh_vap == pytest.approx(5000000. / Evap.m_dot_r, rel=1e-12)
    assert Evap.x_in_r == 0.0 and Evap.x_out_r == 1.0
    assert Evap.Phase_in_r == '0.000 (Saturated Liquid)'
    assert Evap.Phase_out_r == '1.000 (Saturated Vapor)'
    assert ('Mass flow rate', 'lb/hr', Evap.m_dot_r) in Evap.OutputList()

    Evap = EvaporatorClass(Q_duty=1000., T_in_r=450., Table=synthetic_table)
    Evap.Calculate()
    assert Evap.Ref == 'Coolant Y'
    dH = 10000. * ((1 - 450. / 600.) / (1 - 500. / 600.))**0.38
    assert Evap.m_dot_r == pytest.approx(1000. / (dH / 40.), rel=1e-12)


def test_phase_label():
    assert PhaseLabel(0.9) == '1.000 (Gas)'
    assert PhaseLabel(0.005) == 'Liquid/Two-Phase'
    assert Phase_Z(0.01) == ('Liquid/Two-Phase', None)
