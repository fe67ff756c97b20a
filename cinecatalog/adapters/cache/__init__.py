"""Cache des réponses de lecture."""
