from anneal.algorithms.sa import anneal, simulated_annealing

__all__ = ["anneal", "simulated_annealing"]
