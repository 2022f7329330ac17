import matplotlib
matplotlib.use('Agg')

import pytest

from NGR_codes.Correlations.ComponentProperties import PropertyTableClass, SpeciesRecord


@pytest.fixture
def methane():
    return {'Methane': 1.0}


@pytest.fixture
def lean_gas():
    return {
        'Methane':          0.90,
        'Ethane':           0.05,
        'n-Butane':         0.01,
        'Carbon Dioxide':   0.02,
        'Nitrogen':         0.02,
    }


@pytest.fixture
def methane_params(methane):
    # 10,000,000 lb/hr of methane from 100 F to -40 F at 800 psia
    return {
        'm_dot_g':      10000000.,
        'T_in_g':       559.67,
        'T_out_g':      419.67,
        'p_g':          800.,
        'Composition':  methane,
    }


@pytest.fixture
def synthetic_table():
    return PropertyTableClass([
        SpeciesRecord('Gas X', Tc=300.0, Pc=600.0, omega=0.05, MW=20.0, Cp_A=9.0),
        SpeciesRecord('Coolant Y', Tc=600.0, Pc=600.0, omega=0.15, MW=40.0, Cp_A=15.0,
                      Hvap_ref=10000., T_ref_Hvap=500.0),
    ], Refrigerant='Coolant Y')
