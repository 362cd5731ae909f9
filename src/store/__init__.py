"""In-memory storage of analyzed strings and the filter engine over them."""
