# Sensitivities.py
#
# Parameter sweeps of the natural gas chiller

# ---------------------------------------------------------------------
#   Imports
# ---------------------------------------------------------------------
from __future__ import division, print_function, absolute_import
from pathlib import Path
import numpy as np
import pandas as pd

from NGR_codes.Cycles.Cycle import ChillerCycleClass
from NGR_codes.Correlations.ComponentProperties import DefaultPropertyTable


# ---------------------------------------------------------------------
#   Sweep definitions
# ---------------------------------------------------------------------
def get_sensitivity_variables():

    sensitivity_variables = ['m_dot_g', 'T_in_g', 'T_out_g', 'p_g', 'T_in_r']

    return sensitivity_variables


def run_sensitivity(variable_name, values, gas_params, T_in_r=None, Table=DefaultPropertyTable):
    """
    Recalculate the chiller for each value of one input and collect the results

    gas_params holds the nominal GasCoolerClass parameters; T_in_r (refrigerant
    inlet temperature, R) is needed when the refrigerant flow is wanted or swept.
    Returns a pandas DataFrame with one row per value.
    """
    if variable_name not in get_sensitivity_variables():
        raise ValueError('variable_name must be one of ' + str(get_sensitivity_variables()))

    rows = []
    for value in np.atleast_1d(values):
        value = float(value)
        params = dict(gas_params)
        T_ref = T_in_r
        if variable_name == 'T_in_r':
            T_ref = value
        else:
            params[variable_name] = value

        Cycle = ChillerCycleClass(Table=Table)
        Cycle.CalculateGasCooler(**params)
        row = {
            variable_name:      value,
            'Q_duty':           Cycle.Q_duty,
            'Z_in_g':           Cycle.GasCooler.Z_in_g,
            'Z_out_g':          Cycle.GasCooler.Z_out_g,
            'h_in_g':           Cycle.GasCooler.h_in_g,
            'h_out_g':          Cycle.GasCooler.h_out_g,
        }
        if T_ref is not None:
            row['m_dot_r']      = Cycle.CalculateEvaporator(T_ref)
            row['dh_vap']       = Cycle.Evaporator.dh_vap
        rows.append(row)

    return pd.DataFrame(rows)


def sweep_outlet_temperature(T_out_values, gas_params, T_in_r=None, Table=DefaultPropertyTable):
    return run_sensitivity('T_out_g', T_out_values, gas_params, T_in_r, Table)


def sweep_pressure(P_values, gas_params, T_in_r=None, Table=DefaultPropertyTable):
    return run_sensitivity('p_g', P_values, gas_params, T_in_r, Table)


def sweep_refrigerant_temperature(T_in_r_values, gas_params, Table=DefaultPropertyTable):
    return run_sensitivity('T_in_r', T_in_r_values, gas_params, None, Table)


def save_results(results, file_name):
    """
    Write a sweep to .xlsx (openpyxl) or .csv, chosen by the file suffix
    """
    path = Path(file_name)
    if path.suffix == '.xlsx':
        results.to_excel(path, index=False, engine='openpyxl')
    else:
        results.to_csv(path, index=False)
    return path
