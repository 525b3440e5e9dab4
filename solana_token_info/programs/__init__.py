"""Account decoders for the on-chain programs the tool reads from."""
