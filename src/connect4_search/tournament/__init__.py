from connect4_search.tournament.arena import (
    GameRecord,
    SeriesResult,
    DRAW,
    play_game,
    run_series,
    make_arbitrator_factory,
)

__all__ = ['GameRecord', 'SeriesResult', 'DRAW', 'play_game', 'run_series', 'make_arbitrator_factory']
