"""
template-method: one fixed algorithm skeleton, several variants.

``AbstractClass.run()`` executes a fixed sequence of steps. Variants supply
the required steps and may override the optional hooks; ``client_code``
runs any of them through the same interface.
"""

from template_method.framework import (
    AbstractClass,
    ClientRunner,
    ConcreteClass1,
    ConcreteClass2,
    RunResult,
    client_code,
    run_demo,
)

__version__ = "0.1.0"
__all__ = [
    "AbstractClass",
    "ConcreteClass1",
    "ConcreteClass2",
    "client_code",
    "ClientRunner",
    "RunResult",
    "run_demo",
]
