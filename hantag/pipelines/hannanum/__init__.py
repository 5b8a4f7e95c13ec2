"""
Hannanum Backend Module

Runs the KAIST JHannanum plugins inside the JVM that ships with konlpy.
Uses lazy loading so that jpype is only imported once a backend is needed.
"""

def __getattr__(name):
    """Lazy loading for the Hannanum backend to avoid starting up jpype on import"""
    if name == 'HannanumBackend':
        from .backend import HannanumBackend
        return HannanumBackend
    elif name == 'STAGES':
        from .stages import STAGES
        return STAGES
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")

__all__ = ['HannanumBackend', 'STAGES']
