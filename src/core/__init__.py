"""
Core value types, linear algebra and interchange contracts.

Angle → Complex → ComplexVector / Matrix[Complex]: зависимости направлены
только вниз, ввода-вывода и разделяемого состояния нет.
"""
