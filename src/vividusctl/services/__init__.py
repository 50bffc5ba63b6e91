"""Service layer: each operation returns a ServiceResult."""
