import os

# kivy should not try to interpret the test runner's command line.
os.environ.setdefault('KIVY_NO_ARGS', '1')
