"""Remote spreadsheet gateway."""
from .sheets import SheetsConfigError, SheetsError, SheetsFetchError, SheetsGateway, SheetsSaveError
