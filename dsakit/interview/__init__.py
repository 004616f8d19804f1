"""Interview-style puzzles, apartment and container choice, and allocation problems."""