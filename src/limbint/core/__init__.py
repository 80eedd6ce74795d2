"""
Core value type, limb arithmetic, errors and serialization contracts.

Не зависит от ввода-вывода: потоки и CLI живут в limbint.io и limbint.cli.
"""
