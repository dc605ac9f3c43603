"""In-memory blockchain world: accounts, snapshots, block info and state updates."""