from .classes import seg_method, class_dic
