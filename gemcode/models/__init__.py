# Import all models so SQLAlchemy metadata is populated for create_all / migrations
from gemcode.models.code_sequence import CodeSequence
from gemcode.models.generated_code import GeneratedCode

__all__ = [
    "CodeSequence",
    "GeneratedCode",
]
