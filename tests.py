import os
import unittest
import doctest

# kivy should not try to interpret the test runner's command line.
os.environ.setdefault('KIVY_NO_ARGS', '1')

import channel
import colorscheme
import utils

from dsn.blocks import utils as blocks_utils
from dsn.gaps import structure as gaps_structure
from dsn.gaps import utils as gaps_utils
from dsn.navigation import utils as navigation_utils
from dsn.viewports import utils as viewports_utils

from widgets import animate


def load_tests(loader, tests, ignore):
    # Test the docstrings inside our actual codebase
    tests.addTests(doctest.DocTestSuite(utils))
    tests.addTests(doctest.DocTestSuite(channel))
    tests.addTests(doctest.DocTestSuite(colorscheme))
    tests.addTests(doctest.DocTestSuite(gaps_structure))
    tests.addTests(doctest.DocTestSuite(gaps_utils))
    tests.addTests(doctest.DocTestSuite(blocks_utils))
    tests.addTests(doctest.DocTestSuite(navigation_utils))
    tests.addTests(doctest.DocTestSuite(viewports_utils))
    tests.addTests(doctest.DocTestSuite(animate))

    # Some tests in the doctests style are too large to nicely fit into a docstring; better to keep them separate:
    tests.addTests(doctest.DocFileSuite("doctests/gaps.txt"))
    tests.addTests(doctest.DocFileSuite("doctests/navigation.txt"))
    tests.addTests(doctest.DocFileSuite("doctests/viewport.txt"))
    tests.addTests(doctest.DocFileSuite("doctests/canvas.txt"))
    tests.addTests(doctest.DocFileSuite("doctests/demo_mode.txt"))

    return tests


if __name__ == '__main__':
    unittest.main()
