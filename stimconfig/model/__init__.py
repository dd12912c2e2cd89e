"""Channel model: data, store, selection, grouping and batch editing."""
