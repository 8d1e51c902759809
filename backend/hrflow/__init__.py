"""HR Workflow Engine Backend Application.

Validation and simulation service for the HR workflow designer.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
