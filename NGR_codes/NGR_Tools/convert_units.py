from __future__ import division, print_function, absolute_import

# Temperature
def F2R(T):
    return T + 459.67


def R2F(T):
    return T - 459.67


def K2R(T):
    return T * 9.0 / 5.0


def R2K(T):
    return T * 5.0 / 9.0


def F2K(T):
    return R2K(F2R(T))


# Pressure
def psi2kPa(p):
    return p * 6.894757293168361


def kPa2psi(p):
    return p / 6.894757293168361


def psi2Pa(p):
    return psi2kPa(p) * 1000.0


# Power (heat duty)
def BTUh2W(Q):
    return Q * 0.2930710701722222


def W2BTUh(Q):
    return Q / 0.2930710701722222


# Specific enthalpy
def Btulbm2Jkg(h):
    return h * 2326.0


def Jkg2Btulbm(h):
    return h / 2326.0


# Mass flow
def lbh2kgs(m_dot):
    return m_dot * 0.45359237 / 3600.0


def kgs2lbh(m_dot):
    return m_dot * 3600.0 / 0.45359237
