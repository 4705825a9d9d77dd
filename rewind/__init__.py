"""git-rewind: yearly GitHub activity statistics"""
