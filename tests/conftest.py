"""Shared fixtures: sample node tree dumps."""

import pytest

# Trimmed-down debug_print_parse output with the log line prefix removed.
_QUERY_DUMP = """\
parse tree of SELECT id FROM t1
   {QUERY
   :commandType 1
   :querySource 0
   :canSetTag true
   :utilityStmt <>
   :resultRelation 0
   :rtable (
      {RANGETBLENTRY
      :alias <>
      :eref
         {ALIAS
         :aliasname t1
         :colnames ("id" "name")
         }
      :rtekind 0
      }
   )
   :jointree
      {FROMEXPR
      :fromlist (
         {RANGETBLREF
         :rtindex 1
         }
      )
      :quals <>
      }
   :targetList (
      {TARGETENTRY
      :expr
         {VAR
         :varno 1
         :varattno 1
         }
      :resno 1
      :resname id
      }
   )
   }
"""


@pytest.fixture
def query_dump() -> str:
    """A QUERY tree with lists, folded fields, NULL pointers and colnames."""
    return _QUERY_DUMP


@pytest.fixture
def nested_dump() -> str:
    """Two records where the second hangs off a field of the first."""
    return "{A :f1 1 :f2 { B :g1 2 } }"


@pytest.fixture
def list_dump() -> str:
    """A record with a two-element list of records."""
    return "{A :lst ( {B} {C} ) }"


@pytest.fixture
def query_file(tmp_path, query_dump):
    path = tmp_path / "query.node"
    path.write_text(query_dump)
    return path
