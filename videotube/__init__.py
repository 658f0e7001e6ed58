"""
VideoTube Backend
=================

Video sharing platform API: accounts, videos, comments, likes,
subscriptions, playlists and tweets.
"""
