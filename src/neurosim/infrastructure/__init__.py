"""
Infrastructure layer of NeuroSim: the NumPy-backed tensor, the built-in
operations, the graph container, the executor and the builders.
"""
