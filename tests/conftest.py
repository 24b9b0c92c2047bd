import matplotlib

# no display in CI; plots are written to files or discarded
matplotlib.use('Agg')
