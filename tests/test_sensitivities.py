import numpy as np
import pandas as pd
import pytest

from NGR_codes.Cycles.Sensitivities import (get_sensitivity_variables, run_sensitivity, save_results,
                                            sweep_outlet_temperature, sweep_pressure,
                                            sweep_refrigerant_temperature)


def test_outlet_temperature_sweep(methane_params):
    results = sweep_outlet_temperature([419.67, 459.67, 499.67], methane_params, T_in_r=419.67)
    assert isinstance(results, pd.DataFrame)
    assert len(results) == 3
    assert list(results['T_out_g']) == [419.67, 459.67, 499.67]
    # warmer outlet gives a smaller duty
    assert np.all(np.diff(results['Q_duty']) > 0)
    assert np.all(np.diff(results['m_dot_r']) < 0)
    assert np.all(results['Q_duty'] < 0)


def test_pressure_sweep_without_refrigerant(methane_params):
    results = sweep_pressure(np.linspace(200., 800., 4), methane_params)
    assert len(results) == 4
    assert 'm_dot_r' not in results.columns
    # Z at the outlet drops as the pressure rises
    assert np.all(np.diff(results['Z_out_g']) < 0)


def test_refrigerant_temperature_sweep(methane_params):
    results = sweep_refrigerant_temperature([399.67, 419.67, 439.67], methane_params)
    assert np.allclose(results['Q_duty'], results['Q_duty'][0])
    # latent heat falls as the evaporating temperature rises
    assert np.all(np.diff(results['dh_vap']) < 0)
    assert np.all(np.diff(results['m_dot_r']) > 0)


def test_unknown_variable(methane_params):
    assert 'p_g' in get_sensitivity_variables()
    with pytest.raises(ValueError):
        run_sensitivity('Composition', [1.0], methane_params)


def test_save_results(methane_params, tmp_path):
    results = sweep_outlet_temperature([419.67, 459.67], methane_params)

    path = save_results(results, tmp_path / 'sweep.csv')
    back = pd.read_csv(path)
    assert list(back.columns) == list(results.columns)
    assert np.allclose(back['Q_duty'], results['Q_duty'])

    path = save_results(results, str(tmp_path / 'sweep.xlsx'))
    back = pd.read_excel(path, engine='openpyxl')
    assert len(back) == 2
