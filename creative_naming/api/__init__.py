"""HTTP request/response shaping."""
