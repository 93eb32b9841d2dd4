"""
Exceptions thrown when a RecipeMD document cannot be parsed.

All exceptions derive from :py:exc:`RecipeMDError` and, besides their string
form, describe the problem in three parts suitable for showing to a user:

* :py:attr:`RecipeMDError.description`: a one-line summary
* :py:attr:`RecipeMDError.failure_reason`: what exactly was wrong
* :py:attr:`RecipeMDError.recovery_suggestion`: how to fix it

.. autoexception:: RecipeMDError
    :members:

.. autoexception:: MissingTitleError

.. autoexception:: MissingIngredientSectionError

.. autoexception:: InvalidAmountError

.. autoexception:: MalformedStructureError
"""

from dataclasses import dataclass


__all__ = [
    "RecipeMDError",
    "MissingTitleError",
    "MissingIngredientSectionError",
    "InvalidAmountError",
    "MalformedStructureError",
]


SPECIFICATION_URL = "https://recipemd.org/specification.html"


@dataclass
class RecipeMDError(ValueError):
    """Base class for exceptions thrown while parsing a RecipeMD document."""

    @property
    def description(self) -> str:
        raise NotImplementedError()

    @property
    def failure_reason(self) -> str:
        raise NotImplementedError()

    @property
    def recovery_suggestion(self) -> str:
        raise NotImplementedError()

    def __str__(self) -> str:
        return self.description


@dataclass
class MissingTitleError(RecipeMDError):
    """Thrown when the document has no level-1 heading."""

    @property
    def description(self) -> str:
        return "Recipe is missing a title"

    @property
    def failure_reason(self) -> str:
        return "No level-1 heading (# Title) was found in the document."

    @property
    def recovery_suggestion(self) -> str:
        return (
            "Add a title at the beginning of the document using a "
            "level-1 heading: # Recipe Name"
        )


@dataclass
class MissingIngredientSectionError(RecipeMDError):
    """
    Thrown when no horizontal rule (``---``) follows the title to mark the
    start of the ingredients.
    """

    @property
    def description(self) -> str:
        return "Recipe is missing the ingredient section"

    @property
    def failure_reason(self) -> str:
        return "No horizontal rule (---) was found to mark the ingredient section."

    @property
    def recovery_suggestion(self) -> str:
        return (
            "Add a horizontal rule (---) after the description to mark the "
            "start of ingredients."
        )


@dataclass
class InvalidAmountError(RecipeMDError):
    """
    Thrown when some text could not be parsed as an amount. The lenient parser
    treats such amounts as absent; this is only thrown in strict mode and by
    :py:meth:`recipe_md.recipe.Amount.from_text`.
    """

    text: str
    """The offending amount text."""

    @property
    def description(self) -> str:
        return f"Invalid amount: '{self.text}'"

    @property
    def failure_reason(self) -> str:
        return f"The text '{self.text}' could not be parsed as a valid amount."

    @property
    def recovery_suggestion(self) -> str:
        return (
            "Use a valid format: integers (2), decimals (1.5), "
            "fractions (1/2), or mixed numbers (1 1/2)."
        )


@dataclass
class MalformedStructureError(RecipeMDError):
    """Thrown when parsing fails for any other (unexpected) reason."""

    message: str

    @property
    def description(self) -> str:
        return f"Malformed recipe: {self.message}"

    @property
    def failure_reason(self) -> str:
        return self.message

    @property
    def recovery_suggestion(self) -> str:
        return f"Review the RecipeMD specification at {SPECIFICATION_URL}"
