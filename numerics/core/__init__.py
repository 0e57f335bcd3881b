"""
Core numerics: capability hierarchy, concrete precisions, Complex value type.

Модули не зависят от внешних систем и не имеют изменяемого состояния.
"""
