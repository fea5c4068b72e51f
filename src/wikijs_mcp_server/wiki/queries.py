"""
Wiki.js GraphQL Documents

Static query/mutation text for every page operation, plus the field table
used to assemble the sparse `pages.update` mutation.
"""

from __future__ import annotations

from typing import Iterable, List, NamedTuple


_PAGE_FIELDS = """
            id
            path
            title
            description
            content
            contentType
            editor
            isPublished
            isPrivate
            locale
            createdAt
            updatedAt
            tags {
              tag
            }
"""

_RESPONSE_RESULT = """
            responseResult {
              succeeded
              errorCode
              slug
              message
            }
"""


GET_PAGE_BY_ID = f"""
    query($id: Int!) {{
      pages {{
        single(id: $id) {{{_PAGE_FIELDS}        }}
      }}
    }}
"""

GET_PAGE_BY_PATH = f"""
    query($path: String!, $locale: String!) {{
      pages {{
        singleByPath(path: $path, locale: $locale) {{{_PAGE_FIELDS}        }}
      }}
    }}
"""

LIST_PAGES = """
    query {
      pages {
        list {
          id
          path
          title
          description
          isPublished
          locale
          contentType
          createdAt
          updatedAt
          tags
        }
      }
    }
"""

SEARCH_PAGES = """
    query($query: String!) {
      pages {
        search(query: $query) {
          results {
            id
            title
            path
            description
            locale
          }
          suggestions
          totalHits
        }
      }
    }
"""

CREATE_PAGE = f"""
    mutation(
      $content: String!
      $description: String!
      $editor: String!
      $isPublished: Boolean!
      $isPrivate: Boolean!
      $locale: String!
      $path: String!
      $tags: [String]!
      $title: String!
    ) {{
      pages {{
        create(
          content: $content
          description: $description
          editor: $editor
          isPublished: $isPublished
          isPrivate: $isPrivate
          locale: $locale
          path: $path
          tags: $tags
          title: $title
        ) {{{_RESPONSE_RESULT}
            page {{
              id
              path
              title
            }}
        }}
      }}
    }}
"""

DELETE_PAGE = f"""
    mutation($id: Int!) {{
      pages {{
        delete(id: $id) {{{_RESPONSE_RESULT}        }}
      }}
    }}
"""

MOVE_PAGE = f"""
    mutation($id: Int!, $destinationPath: String!, $destinationLocale: String!) {{
      pages {{
        move(
          id: $id
          destinationPath: $destinationPath
          destinationLocale: $destinationLocale
        ) {{{_RESPONSE_RESULT}        }}
      }}
    }}
"""


# ---------------------------------------------------------------------
# Sparse update mutation
# ---------------------------------------------------------------------

class UpdateField(NamedTuple):
    attr: str       # UpdatePageParams attribute
    wire_name: str  # GraphQL argument / variable name
    gql_type: str   # GraphQL variable type


UPDATE_FIELDS: List[UpdateField] = [
    UpdateField("content", "content", "String"),
    UpdateField("title", "title", "String"),
    UpdateField("description", "description", "String"),
    UpdateField("is_published", "isPublished", "Boolean"),
    UpdateField("tags", "tags", "[String]"),
]


def build_update_mutation(fields: Iterable[UpdateField]) -> str:
    """
    Render a `pages.update` mutation that declares and passes only `fields`.

    `id` is always declared as `Int!`.
    """
    fields = list(fields)

    definitions = ["$id: Int!"] + [f"${f.wire_name}: {f.gql_type}" for f in fields]
    arguments = ["id: $id"] + [f"{f.wire_name}: ${f.wire_name}" for f in fields]
    argument_block = "\n          ".join(arguments)

    return f"""
    mutation({", ".join(definitions)}) {{
      pages {{
        update(
          {argument_block}
        ) {{{_RESPONSE_RESULT}        }}
      }}
    }}
"""
