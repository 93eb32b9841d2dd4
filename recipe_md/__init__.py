"""
A parser and generator for `RecipeMD <https://recipemd.org/>`_, a Markdown
based format for recipes.

.. autofunction:: recipe_md.markdown.parse

.. autofunction:: recipe_md.generator.generate
"""

__version__ = "1.0"

from recipe_md.recipe import (
    Amount,
    Ingredient,
    IngredientGroup,
    Yield,
    Recipe,
)

from recipe_md.exceptions import (
    RecipeMDError,
    MissingTitleError,
    MissingIngredientSectionError,
    InvalidAmountError,
    MalformedStructureError,
)

from recipe_md.lint import Lint, LintKind

from recipe_md.markdown import (
    parse,
    parse_with_diagnostics,
    ParseResult,
    check,
)

from recipe_md.generator import GeneratorOptions, generate
