# The eight TPC-H tables. Each one is loaded into its own directory under the
# remote target directory.
TPCH_TABLES = [
    "lineitem",
    "orders",
    "customer",
    "partsupp",
    "part",
    "supplier",
    "nation",
    "region",
]

DEFAULT_HADOOP_HOME = "/usr"
HADOOP_HOME_ENV = "HADOOP_HOME"

# The generator writes its output files into this subdirectory of the local
# working directory.
LOCAL_DATA_DIR = "data"


def table_file_pattern(table: str) -> str:
    return "{}/{}.tbl*".format(LOCAL_DATA_DIR, table)


def remote_table_dir(remote_dir: str, table: str) -> str:
    return "{}/{}".format(remote_dir.rstrip("/"), table)
