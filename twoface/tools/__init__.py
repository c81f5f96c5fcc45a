""" Integrations with third-party frameworks. Each one requires its own extra. """
