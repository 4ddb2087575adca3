"""Feature packages for cmus-notify."""
