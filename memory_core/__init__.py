"""
Memory game core Python package.

Pure-logic pieces of the card matching game, kept free of any web or
terminal dependency so they can be driven headless from tests.
Modules:
- errors.py: exception taxonomy
- board.py: Board, Card, card states
- symbols.py: Symbol and the default face pool
- deal.py: shuffled board generation
- state.py: Session, GameSnapshot, phases
- flips.py: flip/match transitions
- scheduler.py: cancellable timers
- engine.py: MemoryGame session controller
- render.py: snapshots, clock and text projections
- config.py: MEMORY_* environment settings
- cli.py: terminal host
"""
