class CsvBrowserError(Exception):
    """Base exception for all csv_browser errors"""
    pass

class ConfigError(CsvBrowserError):
    """Invalid or inconsistent global.json"""
    pass

class CsvParseError(CsvBrowserError):
    """
    Upload could not be turned into a dataset:
    corrupted data URL, undecodable bytes, tokenizer failure, size limit
    """
    pass
