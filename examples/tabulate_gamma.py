import numpy as np
from mathfn import gamma

__author__ = 'Robbert Harms'
__date__ = '2026-10-18'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


if __name__ == '__main__':
    for x in range(-3, 6):
        print('Γ({}) = {}'.format(x, gamma(x)))

    print('Γ(1/2) = {} (~ √π = {})'.format(gamma(0.5), np.sqrt(np.pi)))
