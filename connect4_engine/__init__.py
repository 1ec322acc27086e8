"""
connect4-engine

A Connect Four engine built around interchangeable minimax search
strategies, with a line-based text protocol for driving it from other
programs.

## Architecture

The engine is organized into several key modules:

1. **board**: Board representation and rules
   - Immutable numpy-backed 6x7 grid, text notation
   - Move application with gravity, win and draw detection

2. **evaluation**: Position evaluation functions
   - Abstract Evaluator interface (swappable design)
   - WindowEvaluator: four-cell window scoring plus centre control

3. **search**: Search algorithms
   - Alpha-beta, alpha-beta with transposition table, MTD(f)
   - Transposition table with bound flags
   - Root move selection and per-game search sessions

4. **protocol**: Text protocol front end
   - Command loop over stdin/stdout

5. **utils**: Testing and benchmarking utilities
   - Tactical position suite

## Quick Start

### As a Python Library

```python
from connect4_engine.board import Board, Cell
from connect4_engine.search import Algorithm, SearchSession

session = SearchSession()
result = session.select_move(Board(), Algorithm.MTDF, depth=5, subject=Cell.PLAYER_A)
print(f"Best column: {result.column} (score: {result.evaluation})")
```

### As a Protocol Engine

```bash
python -m connect4_engine.protocol
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = ['__version__']
