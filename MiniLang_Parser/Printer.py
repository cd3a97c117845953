from .AST import *


class AstPrinter:
    """Renders a Program as indented text, two spaces per level."""

    indent = '  '

    def __init__(self):
        self.lines = []

    def emit(self, depth, text):
        self.lines.append(self.indent * depth + text)

    def render(self, program):
        self.lines = []
        self.visit(program, 0)
        return ''.join(line + '\n' for line in self.lines)

    def visit(self, node, depth):
        method_name = f'visit_{type(node).__name__}'
        method = getattr(self, method_name, self.generic_visit)
        method(node, depth)

    def generic_visit(self, node, depth):
        raise TypeError(f"Cannot render node of type {type(node).__name__}")

    def visit_Program(self, node, depth):
        if not node.items:
            return
        self.emit(depth, "Program:")
        for item in node.items:
            if isinstance(item, Block):
                self.emit(depth + 1, "Block:")
            elif isinstance(item, FuncDeclaration):
                self.emit(depth + 1, "Function:")
            else:
                self.emit(depth + 1, "Statement:")
            self.visit(item, depth + 2)

    def visit_Block(self, node, depth):
        self.emit(depth, "Block:")
        for statement in node.statements:
            self.visit(statement, depth + 1)

    def visit_Identifier(self, node, depth):
        self.emit(depth, f"Identifier: {node.name}")

    def visit_IntLiteral(self, node, depth):
        self.emit(depth, f"IntLiteral: {node.value}")

    def visit_StringLiteral(self, node, depth):
        self.emit(depth, f"StringLiteral: {node.value}")

    def visit_BinaryOp(self, node, depth):
        self.emit(depth, f"BinaryOp: {node.op}")
        self.visit(node.left, depth + 1)
        self.visit(node.right, depth + 1)

    def visit_FuncDeclaration(self, node, depth):
        self.emit(depth, "FuncDeclaration:")
        self.emit(depth + 1, f"Type: {node.return_type}")
        self.emit(depth + 1, "Name:")
        self.visit(node.name, depth + 2)
        self._visit_list("Parameters", node.params, depth + 1, empty="()")
        self.emit(depth + 1, "Body:")
        self.visit(node.body, depth + 2)

    def visit_FuncCall(self, node, depth):
        self.emit(depth, "FuncCall:")
        self.visit(node.name, depth + 1)
        self._visit_list("Parameters", node.args, depth + 1)

    def visit_Assignment(self, node, depth):
        self.emit(depth, "Assignment:")
        self.visit(node.target, depth + 1)
        self.visit(node.value, depth + 1)

    def visit_IfStatement(self, node, depth):
        self.emit(depth, "IfStatement:")
        self.visit(node.condition, depth + 1)
        self.emit(depth + 1, "Then:")
        self.visit(node.then_block, depth + 2)
        if node.else_block is not None:
            self.emit(depth + 1, "Else:")
            self.visit(node.else_block, depth + 2)

    def visit_ReturnStatement(self, node, depth):
        self.emit(depth, "ReturnStatement:")
        self.visit(node.expression, depth + 1)

    def _visit_list(self, label, nodes, depth, empty=None):
        # only a declaration spells out an empty parameter list
        if not nodes and empty is not None:
            self.emit(depth, f"{label}: {empty}")
            return
        self.emit(depth, f"{label}:")
        for child in nodes:
            self.visit(child, depth + 1)


def dump(program):
    return AstPrinter().render(program)
