from dataclasses import dataclass
from typing import Optional, Tuple, Union


class ASTNode:
    pass


@dataclass(frozen=True)
class Identifier(ASTNode):
    name: str


@dataclass(frozen=True)
class IntLiteral(ASTNode):
    value: int


@dataclass(frozen=True)
class StringLiteral(ASTNode):
    """Raw text of a string token, quotes included, escapes already resolved."""
    value: str


@dataclass(frozen=True)
class BinaryOp(ASTNode):
    left: 'Expression'
    op: str
    right: 'Expression'


@dataclass(frozen=True)
class FuncCall(ASTNode):
    name: Identifier
    args: Tuple['Expression', ...] = ()


@dataclass(frozen=True)
class Assignment(ASTNode):
    target: Identifier
    value: 'Statement'


@dataclass(frozen=True)
class Block(ASTNode):
    statements: Tuple['Statement', ...] = ()


@dataclass(frozen=True)
class FuncDeclaration(ASTNode):
    return_type: str
    name: Identifier
    params: Tuple[Identifier, ...]
    body: Block


@dataclass(frozen=True)
class IfStatement(ASTNode):
    condition: 'Expression'
    then_block: Block
    else_block: Optional[Block] = None


@dataclass(frozen=True)
class ReturnStatement(ASTNode):
    expression: 'Expression'


@dataclass(frozen=True)
class Program(ASTNode):
    items: Tuple['TopLevelItem', ...] = ()


Expression = Union[BinaryOp, Identifier, IntLiteral, StringLiteral]

# A nested bare block is kept as a statement of the enclosing block.
Statement = Union[
    Assignment, FuncCall, FuncDeclaration, IfStatement, ReturnStatement, Block,
    BinaryOp, Identifier, IntLiteral, StringLiteral,
]

TopLevelItem = Union[Block, FuncDeclaration, Statement]
