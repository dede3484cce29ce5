import logging
from .__version__ import VERSION, VERSION_STATUS, __version__
from .library_functions import log_gamma, gamma, beta, log_beta, igamma, iGamma, p_gamma, q_gamma, erf, erfc, \
    p_beta, q_beta, ibeta, iBeta, p_normal, q_normal, p_chi2, q_chi2, gamma_cdf, gamma_sf, p_student_t, q_student_t

logging.getLogger(__name__).addHandler(logging.NullHandler())
