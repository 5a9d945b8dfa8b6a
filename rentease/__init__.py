"""
RentEase: rental marketplace web application for PGs, flats and rooms.
"""
