from simple_interaction.validation.validator import validate

__all__ = ["validate"]
