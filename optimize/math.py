import numpy as np


def dot(x, y):
	""" Computes inner product between vectors
	"""
	return float(np.dot(np.ravel(x), np.ravel(y)))

def norm(x):
	""" Euclidean norm
	"""
	return float(np.linalg.norm(np.ravel(x)))

def angle(x, y):
	""" Angle between vectors, in radians
	"""
	xy = dot(x, y)
	xx = dot(x, x)
	yy = dot(y, y)
	if xx == 0. or yy == 0.:
		return 0.
	ang = xy / (xx*yy)**0.5
	if abs(ang) > 1:
		ang /= abs(ang)
	return np.arccos(ang)
