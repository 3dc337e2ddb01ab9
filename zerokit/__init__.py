"""Small language tools: a regex virtual machine, a linear type checker, a prefix calculator and worked examples."""

__version__ = "0.1.0"