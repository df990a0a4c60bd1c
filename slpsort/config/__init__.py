from slpsort.config.sort_config import SortConfig

__all__ = ['SortConfig']
