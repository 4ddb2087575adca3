"""User interfaces for cmus-notify."""
