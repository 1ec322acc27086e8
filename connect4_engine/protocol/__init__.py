"""
Text Protocol Interface

This module implements the line-based protocol used to drive the engine
from other programs. It follows the shape of chess engine protocols: the
client sets up a position, asks the engine to search, and reads back the
chosen move.

Protocol Flow:
    client → "hello"
    engine → "id name connect4-engine 0.1.0"
    engine → "hellook"
    client → "isready"
    engine → "readyok"
    client → "position startpos moves 3"
    client → "go depth 5"
    engine → "info depth 5 score 4 nodes 1234 time 12 algorithm alphabeta"
    engine → "bestmove 3"
"""

from connect4_engine.protocol.interface import ProtocolEngine, setup_logger

__all__ = ['ProtocolEngine', 'setup_logger']
