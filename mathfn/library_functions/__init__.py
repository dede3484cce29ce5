from mathfn.library_functions.gamma import log_gamma, gamma
from mathfn.library_functions.beta import beta, log_beta
from mathfn.library_functions.incomplete_gamma import igamma, iGamma, p_gamma, q_gamma, \
    p_gamma_normalizable, q_gamma_normalizable
from mathfn.library_functions.error_functions import erf, erfc
from mathfn.library_functions.incomplete_beta import p_beta, q_beta, ibeta, iBeta
from mathfn.library_functions.continuous_distributions import p_normal, q_normal, p_chi2, q_chi2, \
    gamma_cdf, gamma_sf, p_student_t, q_student_t


__author__ = 'Robbert Harms'
__date__ = '2026-10-18'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'
