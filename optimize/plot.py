import matplotlib.pyplot as plt
import numpy as np


def plot_history(history, filename=None, title=None):
	""" Objective and gradient norm against iteration
	"""
	it = history['iter']
	fig, ax = plt.subplots(1, 2, figsize=(10, 4))
	ax[0].plot(it, history['f'], 'b.-')
	ax[0].set_xlabel('iteration')
	ax[0].set_ylabel('f(x)')
	dual = history['dual']
	ax[1].semilogy(it, np.where(dual > 0, dual, np.nan), 'r.-')
	ax[1].set_xlabel('iteration')
	ax[1].set_ylabel('|g|')
	if title:
		fig.suptitle(title)
	fig.tight_layout()
	if filename:
		fig.savefig(filename)
		plt.close(fig)
	return fig
