# excelLayoutState.py

class LayoutState:
    def __init__(self, start_row=2, spacing=0):
        self.start_row = start_row
        self.spacing = spacing

        self.row = start_row
        self.last_row = start_row - 1
        self.max_columns = 0

    def place(self, size):
        """Reserve a block for one entry and advance past it plus the spacing.

        Returns the first row of the reserved block.
        """
        row = self.row
        self.last_row = row + size.rows - 1
        self.max_columns = max(self.max_columns, size.columns)
        self.row += size.rows + self.spacing
        return row
