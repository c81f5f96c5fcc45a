""" Small helpers used across twoface """
