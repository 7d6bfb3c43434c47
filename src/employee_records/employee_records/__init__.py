"""Employee Records package.

Feature modules (employees, photos) sit on top of two storage seams:
a spreadsheet-like tabular store and a file store. Controllers are a thin
Flask layer; business rules live in the services.
"""
