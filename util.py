#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Helpers shared by the other modules: table shape checks, the seeded random
source and solution persistence.
"""
import numpy as np

SEED = 420
RANDOM = np.random.RandomState(SEED)
""" Process-wide random source, serialize access when shared between threads """


def check_matrix(matrix, n, m):
    """
    Check if matrix dimensions are n rows by m columns.
    If n=-1, only columns are checked.

    Args:
        matrix (list): Matrix to check.
        n (int): Expected number of rows.
        m (int): Expected number of columns.

    Returns:
        bool: True if matrix is n x m.
    """
    if matrix is None:
        return False
    if n >= 0 and len(matrix) != n:
        return False
    return all(len(row) == m for row in matrix)


def check_array(array, n):
    """ Check if size of given array is n """
    return array is not None and len(array) == n


def seed(value):
    """ Reseeds the shared random source """
    RANDOM.seed(value)


def random_int(bound):
    """ Uniform integer in [0, bound) """
    return int(RANDOM.randint(bound))


def random_double(lo=0.0, hi=1.0):
    """ Uniform double in [lo, hi) """
    return lo + (hi - lo) * RANDOM.random_sample()


def swap(arr, i, j):
    arr[i], arr[j] = arr[j], arr[i]


def shuffle(arr):
    """
    Shuffles the values of a list in place (Fisher-Yates).

    Args:
        arr (list): Values to shuffle.
    """
    for i in range(len(arr) - 1, 0, -1):
        swap(arr, i, random_int(i + 1))


def to_file(solution, filename):
    """
    Writes the textual rendering of a solution to a file.

    Args:
        solution (Solution): Solution to write.
        filename (str): Path of the output file.
    """
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(str(solution) + "\n")
