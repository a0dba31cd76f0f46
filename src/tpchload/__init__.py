__title__ = "tpchload"
__version__ = "0.1.0"
__description__ = "Generates TPC-H data on a set of hosts and loads it into HDFS."
__author__ = "tpchload developers"
__email__ = ""
__url__ = ""
