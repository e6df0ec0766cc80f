"""Contact-management web backend."""
