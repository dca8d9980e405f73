"""fluentSQL statement layer: statement core, clause builders and facades."""
from fluentsql.statement.base import CompiledStatement, StatementBuilder
from fluentsql.statement.facade import StatementFacade
from fluentsql.statement.replace import ReplaceStatement
from fluentsql.statement.select import SelectStatement

__all__ = [
    "CompiledStatement",
    "StatementBuilder",
    "StatementFacade",
    "SelectStatement",
    "ReplaceStatement",
]
