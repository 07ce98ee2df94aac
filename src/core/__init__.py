"""
Core list-manipulation and number-theory primitives.

Independent, stateless functions modeled on built-ins of a symbolic-computation
language. The only shared state is the default random source.
"""
