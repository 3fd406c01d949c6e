from sortlab.generators.shuffle import consecutive_array, shuffle

__all__ = ["consecutive_array", "shuffle"]
