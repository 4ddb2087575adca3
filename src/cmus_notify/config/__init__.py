"""Settings and filesystem locations for cmus-notify."""
