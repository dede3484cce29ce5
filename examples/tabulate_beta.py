from mathfn import beta

__author__ = 'Robbert Harms'
__date__ = '2026-10-18'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


if __name__ == '__main__':
    for i in range(7):
        for j in range(7):
            x = i - 3.
            y = j - 3.
            print('{}Β({}, {}) = {},'.format(' ' * j, x, y, beta(x, y)))

    print('Β(1/2, 1/2) = {} (~ π)'.format(beta(0.5, 0.5)))
