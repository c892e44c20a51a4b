from .interpolate_hue import interpolate_hue, shortest_hue_delta, lerp

__all__ = ['interpolate_hue', 'shortest_hue_delta', 'lerp']
