import pytest

from NGR_codes.Components.GasCooler import GasCoolerClass, HeatDuty, HeatDutyStates, OutletTemperature
from NGR_codes.NGR_Tools.Exceptions import InvalidComposition, UnknownSpecies


def test_methane_cooling_duty(methane):
    # 10,000,000 lb/hr of methane, 100 F -> -40 F at 800 psia
    Q = HeatDuty(10000000., 559.67, 419.67, 800., methane)
    assert Q < 0
    assert -1.9e9 < Q < -1.45e9


def test_methane_duty_parity_between_root_methods(methane):
    Q_newton = HeatDuty(10000000., 559.67, 419.67, 800., methane, RootMethod='Newton')
    Q_cubic = HeatDuty(10000000., 559.67, 419.67, 800., methane, RootMethod='Cubic')
    assert Q_newton == pytest.approx(Q_cubic, rel=5e-3)


def test_duty_uses_inlet_molar_mass(lean_gas):
    Q, inlet, outlet = HeatDutyStates(1000., 559.67, 459.67, 500., lean_gas)
    assert Q == pytest.approx((outlet.H_total - inlet.H_total) * 1000. / inlet.MW_mix, rel=1e-12)


def test_heating_is_positive(lean_gas):
    assert HeatDuty(1000., 459.67, 559.67, 500., lean_gas) > 0


def test_duty_scales_with_flow(lean_gas):
    Q1 = HeatDuty(1000., 559.67, 459.67, 500., lean_gas)
    Q2 = HeatDuty(2000., 559.67, 459.67, 500., lean_gas)
    assert Q2 == pytest.approx(2 * Q1, rel=1e-12)


def test_outlet_temperature_inverts_duty(lean_gas):
    Q = HeatDuty(1000., 559.67, 480., 500., lean_gas)
    T_out = OutletTemperature(Q, 1000., 559.67, 500., lean_gas, T_min=420.)
    assert T_out == pytest.approx(480., abs=1e-3)


def test_component_matches_function(methane_params):
    GC = GasCoolerClass(**methane_params)
    GC.Calculate()
    Q = HeatDuty(10000000., 559.67, 419.67, 800., {'Methane': 1.0})
    assert GC.Q == pytest.approx(Q, rel=1e-12)
    assert GC.Z_in_g > GC.Z_out_g > 0.01
    assert GC.Phase_in_g == '1.000 (Gas)'
    assert GC.Phase_out_g == '1.000 (Gas)'
    assert GC.MW_mix == 16.04
    assert GC.n_dot_g == pytest.approx(10000000. / 16.04)
    assert GC.DH_g < 0

    OL = GC.OutputList()
    assert ('Q Total', 'Btu/hr', GC.Q) in OL


def test_component_recalculates_after_update(methane_params):
    GC = GasCoolerClass(**methane_params)
    GC.Calculate()
    Q1 = GC.Q
    GC.Update(T_out_g=459.67)
    GC.Calculate()
    assert GC.Q > Q1


def test_component_validates_composition(methane_params):
    GC = GasCoolerClass(**dict(methane_params, Composition={'Methane': 0.5}))
    with pytest.raises(InvalidComposition):
        GC.Calculate()
    assert not hasattr(GC, 'Q')

    GC.Update(Composition={'Methane': 0.5, 'Xenon': 0.5})
    with pytest.raises(UnknownSpecies):
        GC.Calculate()
    assert not hasattr(GC, 'Q')


def test_component_validates_fields(methane_params):
    params = dict(methane_params)
    del params['p_g']
    with pytest.raises(AttributeError):
        GasCoolerClass(**params).Calculate()

    with pytest.raises(AssertionError):
        GasCoolerClass(**dict(methane_params, m_dot_g=-1.)).Calculate()

    with pytest.raises(AttributeError):
        GasCoolerClass(**dict(methane_params, Colour='blue')).Calculate()


def test_component_verbosity(methane_params, capsys):
    GasCoolerClass(Verbosity=2, **methane_params).Calculate()
    out = capsys.readouterr().out
    assert 'GasCooler :: Q =' in out
    assert 'n_dot' in out
