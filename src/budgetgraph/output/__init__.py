"""Output layer — renders ServiceResult as Rich text, JSON, or bare ids."""
