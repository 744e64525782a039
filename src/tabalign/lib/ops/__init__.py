"""Operations shared by the CLI and embedding hosts."""
