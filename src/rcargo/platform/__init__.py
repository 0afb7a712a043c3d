"""Platform adapters: filesystem, symlinks and logging."""
