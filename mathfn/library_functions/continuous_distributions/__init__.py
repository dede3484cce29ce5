from mathfn.library_functions.continuous_distributions.normal import p_normal, q_normal
from mathfn.library_functions.continuous_distributions.chi2 import p_chi2, q_chi2
from mathfn.library_functions.continuous_distributions.gamma import gamma_cdf, gamma_sf
from mathfn.library_functions.continuous_distributions.student_t import p_student_t, q_student_t

__author__ = 'Robbert Harms'
__date__ = '2026-10-18'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'
