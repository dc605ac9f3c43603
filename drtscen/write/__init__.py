"""Conversion of scenario models to ordered JSON data and text."""