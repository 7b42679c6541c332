"""
letprint interpreter
A single pass over the statement list with one flat variable store
The store is created per run and threaded through evaluation
"""

import sys
from typing import Callable, Dict, List, Optional, Sequence

from error_handling import UndefinedVariable
from parsing import (
    Identifier, Literal, NumberLiteral, PrintStatement, Statement, VariableDeclaration
)


Emit = Callable[[int], None]


# ============================================================================
# VARIABLE STORE
# ============================================================================

def make_store() -> Dict[str, int]:
  """Create an empty variable store"""
  return {}


def store_bind(store: Dict[str, int], name: str, value: int) -> Dict[str, int]:
  """Bind name to value, overwriting any earlier binding"""
  store[name] = value
  return store


def store_lookup(store: Dict[str, int], name: str) -> int:
  if name not in store:
    raise UndefinedVariable(name)
  return store[name]


# ============================================================================
# EVALUATION FUNCTIONS
# ============================================================================

def eval_literal(literal: Literal, store: Dict[str, int]) -> int:
  """Value of a print argument: number literals bypass the store"""
  if isinstance(literal, NumberLiteral):
    return literal.value
  if isinstance(literal, Identifier):
    return store_lookup(store, literal.name)
  raise TypeError(f"Unknown literal: {literal!r}")


def eval_statement(node: Statement, store: Dict[str, int], emit: Optional[Emit] = None,
                   debug: bool = False) -> Optional[int]:
  """
  Evaluate one statement against the store.
  Returns the printed value for print statements, None for declarations.
  """
  if debug:
    print(f"Evaluating: {type(node).__name__}", file=sys.stderr)

  if isinstance(node, VariableDeclaration):
    store_bind(store, node.identifier, node.value)
    return None
  elif isinstance(node, PrintStatement):
    value = eval_literal(node.content, store)
    if emit is not None:
      emit(value)
    return value
  raise TypeError(f"Unknown statement: {node!r}")


def evaluate(ast: Sequence[Statement], emit: Optional[Emit] = None,
             debug: bool = False) -> List[int]:
  """
  Run the program and return the printed values in program order.
  emit, when given, receives each value as soon as it is printed, so values
  printed before an error have already been delivered when it is raised.
  """
  store = make_store()
  output = []

  for node in ast:
    value = eval_statement(node, store, emit, debug)
    if value is not None:
      output.append(value)

  if debug:
    print(f"Final store ({len(store)} bindings): {store}", file=sys.stderr)

  return output


# ============================================================================
# FACTORY FUNCTIONS
# ============================================================================

class Interpreter:
  """Evaluator facade used by the driver"""

  def __init__(self, debug: bool = False):
    self.debug = debug

  def interpret_program(self, ast: Sequence[Statement], emit: Optional[Emit] = None) -> List[int]:
    return evaluate(ast, emit, self.debug)


def create_interpreter(debug: bool = False) -> Interpreter:
  """Factory function returning an interpreter"""
  return Interpreter(debug=debug)


def create_debug_interpreter() -> Interpreter:
  """Factory function returning a debug interpreter"""
  return create_interpreter(debug=True)
