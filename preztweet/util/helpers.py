
####################
### Imports
####################

## Standard Library
import os
import shutil

####################
### Functions
####################

def flatten(l):
    """
    Flatten a list of lists by one level.

    Args:
        l (list of lists): List of lists
    
    Returns:
        flattened_list (list): Flattened list
    """
    flattened_list = [item for sublist in l for item in sublist]
    return flattened_list

def chunks(l, n):
    """
    Yield successive n-sized chunks from l.

    Args:
        l (list): List of objects
        n (int): Chunksize
    
    Yields:
        Chunks
    """
    for i in range(0, len(l), n):
        yield l[i:i + n]

def make_dirs(directory,
              allow_overwrite=False):
    """
    Create a directory, optionally replacing one that already exists.

    Args:
        directory (str): Path to create
        allow_overwrite (bool): If True, remove an existing directory first
    
    Returns:
        directory (str): The created directory
    """
    ## Deal with Existing Directories
    if os.path.exists(directory):
        if not allow_overwrite:
            raise FileExistsError("Directory already exists. Must allow overwrites to continue. [{}]".format(directory))
        shutil.rmtree(directory)
    ## Make New Directory
    _ = os.makedirs(directory)
    return directory
