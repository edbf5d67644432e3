"""Terminal Wordle game: guess scoring, display and the game command."""