"""
This module parses RecipeMD documents into :py:class:`recipe_md.recipe.Recipe`
objects.

Markdown syntax
===============

Recipes are formatted as in the example below::

    # Guacamole

    A fresh Mexican dip.

    *vegan, Mexican*
    **4 Servings, 200 g**

    ---

    - *2* ripe avocados
    - *1/2 teaspoon* salt
    - *1 tablespoon* [lime juice](lime-juice.md)

    ---

    Mash avocados in a bowl. Add salt and lime juice, mix well.

The document consists of:

* A title, the first level-1 heading.
* Optionally, a description, tags (an emphasised, comma separated list) and a
  yield (a strongly emphasised, comma separated list of amounts).
* A horizontal rule (``---``) marking the start of the ingredients.
* The ingredients: lists of ingredients optionally divided into groups by
  headings. Ingredient amounts are emphasised and precede the ingredient
  name, which may be a link.
* Optionally, a second horizontal rule followed by the instructions, which
  are kept as written.

Amounts may be integers (``2``), decimals (``1.5`` or ``1,5``), fractions
(``1/2``), Unicode fractions (``½``) or mixed numbers (``1 1/2``, ``1½``).
See :py:mod:`recipe_md.number_parser`.

API
===

.. autofunction:: parse

.. autofunction:: parse_with_diagnostics

.. autoclass:: ParseResult
    :members:

.. autofunction:: check

Internals
=========

Internally the :py:mod:`marko` markdown parser is used providing support for
`CommonMark <https://commonmark.org/>`_ markdown syntax (see
:py:mod:`recipe_md.markdown.common`). The resulting element tree is divided
into sections by :py:mod:`recipe_md.markdown.segment`, whose contents are
then parsed by :py:mod:`recipe_md.markdown.metadata` and
:py:mod:`recipe_md.markdown.ingredients`.
"""


from recipe_md.markdown.parser import (
    parse,
    parse_with_diagnostics,
    ParseResult,
    check,
)
