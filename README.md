# covibe

Syntax tree definitions for the CoVibe programming language, and visitors
that walk them. Every node is a plain dataclass. A node with variants, such as
`Expr`, `Stmt`, `Pattern` or `Type`, holds an `id`, a `span` (a pair of byte
offsets) and a `kind` that is one of several small dataclasses. Examples are
`BinaryExpr`, `LetStmt`, `IdentPattern` and `PathType`.

## Modules

- `covibe.core`: node identifiers (`NodeId`, with `NodeId.DUMMY` as id 0,
  and `NodeIdGen`, an endless iterator of fresh ids starting at 1), `Ident`,
  `Path` (`from_ident`, `is_simple`, `last_segment`), `PathSegment`,
  `GenericArgs` and `Lifetime`. It also has `Visibility` (`PUBLIC`, `PRIVATE`,
  `PROTECTED`) and `Restricted`, `Mutability`, the generic parameters
  `TypeParam`, `ConstParam` and `LifetimeParam`, `TraitBound`, and the
  where-clause predicates `BoundPredicate`, `LifetimePredicate` and
  `WhereClause`. Last come `Attribute`, `DocComment`, and the `Module` and
  `Item` roots.
- `covibe.op`: the operators `BinOp`, `UnOp` and `AssignOp`. `str()` on an
  operator gives its source spelling. `BinOp` can report whether it is
  arithmetic, comparison, logical, bitwise or short-circuiting.
  `AssignOp.to_binop()` gives the binary operator that a compound assignment
  applies, or `None` for `=` and `:=`.
- `covibe.literal`: integer, float, string (with format-string parts), char,
  bool, byte and byte-string literals. `CharLit` accepts exactly one
  non-surrogate character. `ByteLit` accepts only values 0 to 255.
- `covibe.pat`, `covibe.ty`, `covibe.stmt`, `covibe.expr` and `covibe.decl`
  hold the pattern, type, statement, expression and declaration nodes.
  Declarations cover functions, structs, enums, traits, impls, type aliases,
  consts, statics, imports, exports, extern blocks, modules and macros.
- `covibe.visitor`: the `Visitor` base class and the `walk_*` functions. They
  traverse a tree in source order without changing it. A walker raises
  `TypeError` when it meets a node kind it does not know.
- `covibe.visitor_mut`: the `VisitorMut` base class for passes that rewrite
  nodes in place. Its default traversal is shallow. It reaches function bodies
  in a module, the operands of binary and unary expressions, block
  expressions, expression statements and `let` initialisers. It does not
  descend into patterns or types.

## Installation

```
pip install .
```

## Example

```python
from covibe.core import NodeIdGen
from covibe.op import AssignOp, BinOp

ids = NodeIdGen()
print(int(next(ids)))                  # 1; 0 is kept for NodeId.DUMMY

print(str(BinOp.POW))                  # **
print(BinOp.AND.is_short_circuit())    # True
print(AssignOp.ADD_ASSIGN.to_binop() is BinOp.ADD)  # True
```

To collect every identifier in a module, subclass `Visitor` and override
`visit_ident`. The default methods for the other node kinds keep walking the
rest of the tree:

```python
from covibe.core import Ident, Item, Module, NodeIdGen
from covibe.decl import Function
from covibe.visitor import Visitor


class IdentCollector(Visitor):
    def __init__(self):
        self.names = []

    def visit_ident(self, ident):
        self.names.append(ident.symbol)


ids = NodeIdGen()
func = Function(next(ids), Ident("main", (4, 8)), (0, 12))
module = Module(next(ids), [Item(next(ids), func, (0, 12))], (0, 12))

collector = IdentCollector()
collector.visit_module(module)
print(collector.names)                 # ['main']
```

## What this package does not do

The package only defines the tree and ways to walk it. It has no lexer or
parser, so trees must be built by hand or by other code. It also has no name
resolution, type checking, code generation or interpreter, and no
command-line tool.

## Running the tests

```
pip install ".[test]"
pytest
```